"""Infrastructure layer: file storage, template assets, workspace wiring."""

"""Output layer: human (rich), JSON, and quiet rendering of ServiceResult."""

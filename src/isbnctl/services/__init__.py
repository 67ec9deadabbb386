"""Service layer — ISBN operations wrapped in the ServiceResult contract."""

"""Service layer: the caller contract over the sequence domain.

Every public service method returns a ServiceResult and never raises
domain errors.
"""

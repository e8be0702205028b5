"""Human, JSON and quiet renderings of ServiceResult."""

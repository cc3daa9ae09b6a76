"""Service layer — note operations returning :class:`ServiceResult`."""

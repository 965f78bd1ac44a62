"""Backend API service for fieldkit form sessions."""

"""Property listing search: criteria filtering and pagination."""

"""Output layer — JSON and Rich rendering of service results."""

"""Application layer: workspace state and transfer objects."""

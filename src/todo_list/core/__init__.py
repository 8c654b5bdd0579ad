"""Application state and ports shared by the front-end."""

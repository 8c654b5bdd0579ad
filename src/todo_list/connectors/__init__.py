"""Front-ends that drive the task store (console)."""

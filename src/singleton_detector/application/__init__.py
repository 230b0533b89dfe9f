"""Application layer: discovery, detection, reporting and the driver."""

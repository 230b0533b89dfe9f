"""Infrastructure layer: filesystem, archive and class-file adapters."""

"""Domain layer: exceptions, model and ports. No I/O."""

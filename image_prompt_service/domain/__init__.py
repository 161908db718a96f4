"""Domain layer: entities, ports, errors and the prompt lifecycle."""

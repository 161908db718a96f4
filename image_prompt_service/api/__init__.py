"""HTTP surface for the prompt lifecycle."""

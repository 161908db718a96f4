"""Image to prompt service - turns an uploaded image into a generative-AI prompt."""

__version__ = "0.1.0"

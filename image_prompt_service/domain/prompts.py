"""Instruction sent to the generation service together with the image."""

PROMPT_INSTRUCTION = (
    "Describe this image in detail. Focus on the style, composition, colors, and mood. "
    "The description should be a creative and descriptive prompt suitable for an AI image "
    "generation model like Midjourney or DALL-E. Start with a short, punchy summary, "
    "then elaborate on the details."
)

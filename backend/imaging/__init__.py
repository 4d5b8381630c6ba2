"""
Image transformation layer.

Responsibilities:
- Manage Replicate API configuration and credentials.
- Send the room photo, the style prompt and the transformation strength
  to the hosted image model.
- Normalise the model output into a URL or inline data payload.
- Raise ``ImageProviderError`` for every provider-side failure.
"""

from __future__ import annotations

import logging
from typing import Any

import replicate

from ..recommendations.models import TransformedImage
from .config import DEFAULT_IMAGING_CONFIG, ImagingConfig
from .errors import ImageProviderError

logger = logging.getLogger(__name__)


def _image_input(image_url: str | None, image_data: str | None) -> str:
    """Replicate accepts either a public URL or a data URI for file inputs."""
    if image_url:
        return image_url
    if image_data:
        if image_data.startswith("data:"):
            return image_data
        return f"data:image/jpeg;base64,{image_data}"
    raise ImageProviderError("No image supplied")


def _parse_output(output: Any) -> TransformedImage:
    if isinstance(output, (list, tuple)):
        if not output:
            raise ImageProviderError("Image provider returned no images")
        output = output[0]

    # Newer client versions wrap results in FileOutput objects.
    url = getattr(output, "url", None)
    if url is not None and not isinstance(output, str):
        output = url() if callable(url) else url

    if isinstance(output, str) and output:
        if output.startswith("data:"):
            return TransformedImage(data=output)
        return TransformedImage(url=output)

    raise ImageProviderError(f"Unexpected image provider output: {type(output).__name__}")


def transform_image(
    prompt: str,
    strength: float,
    image_url: str | None = None,
    image_data: str | None = None,
    config: ImagingConfig = DEFAULT_IMAGING_CONFIG,
) -> TransformedImage:
    """
    Restyle a room photo with the hosted interior design model.

    Raises ``ImageProviderError`` when the provider is not configured, the
    call fails, or the output cannot be interpreted.
    """
    if not config.enabled or not config.api_token:
        raise ImageProviderError("Image provider is not configured")

    model_input = {
        "image": _image_input(image_url, image_data),
        "prompt": prompt,
        "negative_prompt": config.negative_prompt,
        "prompt_strength": strength,
        "num_inference_steps": config.num_inference_steps,
        "guidance_scale": config.guidance_scale,
    }

    try:
        client = replicate.Client(api_token=config.api_token)
        output = client.run(config.model, input=model_input)
    except Exception as exc:
        logger.warning("Replicate call failed for model %s", config.model, exc_info=True)
        raise ImageProviderError(f"Image provider request failed: {exc}") from exc

    return _parse_output(output)

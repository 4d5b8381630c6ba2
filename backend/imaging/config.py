from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ImagingConfig:
    api_token: str = os.getenv("REPLICATE_API_TOKEN", "")
    model: str = os.getenv(
        "REPLICATE_MODEL",
        "adirik/interior-design:76604baddc85b1b4616e1c6475eca080da339c8875bd4996705440484a6eac38",
    )
    num_inference_steps: int = 50
    guidance_scale: float = 15.0
    negative_prompt: str = (
        "lowres, watermark, banner, logo, text, deformed, blurry, out of focus, "
        "distorted furniture, extra windows"
    )
    enabled: bool = True


DEFAULT_IMAGING_CONFIG = ImagingConfig()

"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Build prompts from the selection criteria and the recommended products.
- Ask the LLM for a short "why it fits" line per product.
- Graceful fallback when the LLM is unavailable or returns invalid output.

The LLM never reorders products; ranking stays with the engine.
"""

"""
Leak-Proof - git pre-commit guard that blocks committed secrets

Inspects staged files before every commit and rejects the commit when it finds:
- .env-style files that should never be versioned
- Cloud provider access keys and private key headers
- Vendor API keys (OpenAI, Google/Gemini)
- Hardcoded tokens, passwords and other credential assignments
"""

__version__ = "1.0.0"


__all__ = [
    "__version__",
]

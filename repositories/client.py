"""
Supabase client initialization.

This module contains *only* the database connection setup. The client is
created on demand and handed to the repository classes by the caller; no
repository imports a shared client at module level.

Environment variables required:
- SUPABASE_URL: Your Supabase project URL
- SUPABASE_KEY: Your Supabase API key (use a server-side key only on the backend)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

# The dependency is `supabase` (supabase-py). If your editor can't resolve it,
# install it in your environment: `pip install supabase`.
from supabase import Client, create_client  # type: ignore[import-not-found]

# .env lives at the project root
env_path = Path(__file__).parent.parent / ".env"


def get_supabase_client(environ: Optional[Mapping[str, str]] = None) -> Client:
    """
    Create a Supabase client from SUPABASE_URL / SUPABASE_KEY.

    Raises:
        RuntimeError: if either variable is missing
    """

    if environ is None:
        load_dotenv(dotenv_path=env_path)
        environ = os.environ

    supabase_url = environ.get("SUPABASE_URL")
    supabase_key = environ.get("SUPABASE_KEY")

    if not supabase_url:
        raise RuntimeError(
            "Missing environment variable: SUPABASE_URL. "
            "Set SUPABASE_URL to your Supabase project URL."
        )

    if not supabase_key:
        raise RuntimeError(
            "Missing environment variable: SUPABASE_KEY. "
            "Set SUPABASE_KEY to your Supabase API key."
        )

    return create_client(supabase_url, supabase_key)


__all__ = ["get_supabase_client"]

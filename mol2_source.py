#!/usr/bin/env python3
"""
mol2_source.py

Locates and fetches the MOL2 text to display.

A molecule is selected by name. The name is put into MOL2_SOURCE["template"]
and resolved against MOL2_SOURCE["base"], which is either a directory or an
http(s) URL. Without a name, MOL2_SOURCE["default"] is used. An argument that
already names an existing file is used as-is.

Fetching never raises for I/O problems; the outcome is a FetchResult that is
checked before any scene is built.
"""

import os
import urllib.error
import urllib.parse
import urllib.request
from typing import NamedTuple, Optional

from config import MOL2_SOURCE


class FetchResult(NamedTuple):
    ok: bool
    location: str
    text: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, location, text):
        return cls(ok=True, location=location, text=text)

    @classmethod
    def failure(cls, location, reason):
        return cls(ok=False, location=location, reason=reason)


def is_url(location):
    return urllib.parse.urlparse(location).scheme in ("http", "https", "file")


def resolve_location(name=None, base=None, template=None, default=None):
    """
    Turn a molecule name into a file path or URL.

    Parameters:
        name (str or None): molecule name, or a path to an existing file
        base, template, default: override the MOL2_SOURCE settings

    Returns:
        str: the location to fetch
    """
    base = MOL2_SOURCE["base"] if base is None else base
    template = MOL2_SOURCE["template"] if template is None else template
    default = MOL2_SOURCE["default"] if default is None else default

    if name and os.path.isfile(name):
        return name

    relative = template.format(name=urllib.parse.quote(name)) if name else default

    if is_url(base):
        if not base.endswith("/"):
            base = base + "/"
        return urllib.parse.urljoin(base, relative)
    return os.path.join(base, relative)


def _fetch_url(location, timeout):
    request = urllib.request.Request(location, headers={"User-Agent": "quickMOL2"})
    with urllib.request.urlopen(request, timeout=timeout) as response:  # nosec B310 - http(s)/file only
        return response.read().decode("utf-8")


def _read_file(location):
    with open(location, "r", encoding="utf-8") as f:
        return f.read()


def fetch_mol2(location, timeout=None):
    """
    Fetch the text at `location` (path or URL).

    Returns:
        FetchResult: success with the text, or failure with a reason.
    """
    timeout = MOL2_SOURCE["timeout"] if timeout is None else timeout
    try:
        if is_url(location):
            text = _fetch_url(location, timeout)
        else:
            text = _read_file(location)
    except urllib.error.HTTPError as error:
        return FetchResult.failure(location, f"HTTP {error.code}: {error.reason}")
    except urllib.error.URLError as error:
        return FetchResult.failure(location, f"cannot reach {location}: {error.reason}")
    except FileNotFoundError:
        return FetchResult.failure(location, f"file not found: {location}")
    except OSError as error:
        return FetchResult.failure(location, f"cannot read {location}: {error}")
    except UnicodeDecodeError as error:
        return FetchResult.failure(location, f"{location} is not UTF-8 text: {error}")
    return FetchResult.success(location, text)


def load_mol2_text(name=None, **overrides):
    """Resolve `name` and fetch it in one step."""
    timeout = overrides.pop("timeout", None)
    return fetch_mol2(resolve_location(name, **overrides), timeout=timeout)

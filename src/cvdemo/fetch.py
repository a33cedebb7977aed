from __future__ import annotations
import http.client
import logging
import urllib.error
import urllib.request
from typing import Optional

import cv2
import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "opencv-demo/1.0"


def download_bytes(url: str, user_agent: str = DEFAULT_USER_AGENT) -> bytes:
    """
    Blocking GET of `url`; returns the whole body.
    Redirects are followed by the default opener. No timeout, no retry.
    Raises urllib / http.client / OSError exceptions on transport failure.
    """
    opener = urllib.request.build_opener()
    req = urllib.request.Request(url, headers={"User-Agent": user_agent})
    with opener.open(req) as resp:
        return resp.read()


def decode_image(data: bytes) -> Optional[np.ndarray]:
    """Decode encoded image bytes to BGR uint8; None if empty or undecodable."""
    if not data:
        return None
    buf = np.frombuffer(data, dtype=np.uint8)
    try:
        img = cv2.imdecode(buf, cv2.IMREAD_COLOR)
    except cv2.error as e:
        logger.debug("imdecode failed: %s", e)
        return None
    if img is None or img.size == 0:
        return None
    return img


def fetch_image(url: str, user_agent: str = DEFAULT_USER_AGENT) -> Optional[np.ndarray]:
    """Download and decode `url`. Any failure collapses to None."""
    try:
        data = download_bytes(url, user_agent=user_agent)
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
        # HTTPError is a URLError; malformed URLs raise ValueError
        logger.debug("download of %s failed: %s", url, e)
        return None

    img = decode_image(data)
    if img is None:
        logger.debug("could not decode %d bytes from %s", len(data), url)
    return img

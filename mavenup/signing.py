"""
This file provides our support around verifying downloaded archives against the
checksums Apache publishes next to them.
"""
import hashlib
from pathlib import Path
from typing import Optional

from mavenup.config import CHECKSUM_SUFFIX
from mavenup.download import downloader
from mavenup.utils import verbose_out, warn


def sign_path(path: Path) -> str:
    """
    A function for computing the SHA-512 digest of a file.

    :param path: the path to the file to sign.
    :return: the hex form of the file's digest.
    """
    digest = hashlib.sha512()

    with path.open('rb') as fd:
        chunk = fd.read(4096)

        while chunk:
            digest.update(chunk)
            chunk = fd.read(4096)

    return digest.hexdigest()


def _get_reference_signature(url: str) -> Optional[str]:
    """
    A function that fetches the published checksum for the file at the given URL.
    Apache's checksum files hold either the bare digest or the digest followed by the
    file name, so only the first word is kept.

    :param url: the URL of the file whose checksum we want.
    :return: the reference checksum or ``None`` if it could not be had.
    """
    try:
        text = downloader.fetch_text(f'{url}{CHECKSUM_SUFFIX}')
    except ValueError as error:
        warn(f'No checksum available: {error.args[0]}')
        return None

    words = text.split()

    return words[0].lower() if words else None


def verify_signature(path: Path, url: str) -> Optional[bool]:
    """
    A function that will verify the given downloaded file against the checksum published
    alongside the URL it came from.

    :param path: the path to verify the signature for.
    :param url: the URL the file was downloaded from.
    :return: ``True`` if the checksum matches, ``False`` if it does not or ``None`` if
    there was no checksum to compare against.
    """
    reference = _get_reference_signature(url)

    if reference is None:
        return None

    verbose_out(f'Verifying {path.name} against {url}{CHECKSUM_SUFFIX}')

    return sign_path(path) == reference

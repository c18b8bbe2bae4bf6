"""
This file provides the support we need for finding out which versions of Maven
exist.  The source of truth is the release history page on Maven's web site.
"""
from typing import List, Optional

from mavenup.config import HISTORY_URL, HISTORY_VERSION_PATTERN
from mavenup.download import downloader
from mavenup.models import Version


def find_versions(html: str) -> List[str]:
    """
    A function that pulls every version number out of the table cells in the given
    HTML text, in the order in which they appear.

    :param html: the text of the release history page.
    :return: the list of versions found.
    """
    versions = []

    for line in html.splitlines():
        for match in HISTORY_VERSION_PATTERN.finditer(line):
            versions.append(match.group(1))

    return versions


def _read_history(html: Optional[str]) -> str:
    return downloader.fetch_text(HISTORY_URL) if html is None else html


def latest_version(html: Optional[str] = None) -> str:
    """
    A function that determines the newest version of Maven.  If no versions can be found,
    an empty string is returned.

    :param html: the text of the release history page.  It is fetched if this is not
    provided.
    :return: the highest version number found.
    """
    versions = sorted(find_versions(_read_history(html)), key=Version, reverse=True)

    return versions[0] if versions else ''


def list_versions(html: Optional[str] = None) -> List[str]:
    """
    A function that lists every known version of Maven, oldest first, without duplicates.

    :param html: the text of the release history page.  It is fetched if this is not
    provided.
    :return: the list of versions.
    """
    versions = dict.fromkeys(find_versions(_read_history(html)))

    return sorted(versions, key=Version)

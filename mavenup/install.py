"""
This file provides the support for installing a particular version of Maven into
a directory.
"""
import tarfile
from pathlib import Path
from typing import List, Union

from mavenup.config import ARCHIVE_DIRECTORY_PREFIX, ARCHIVE_URL, INSTALLABLE_VERSION_PATTERN, PRIMARY_URL, \
    SNAPSHOT_URL
from mavenup.download import downloader
from mavenup.models import Version
from mavenup.signing import verify_signature
from mavenup.utils import move_path, out, remove_file, verbose_out


def get_download_urls(version: str) -> List[str]:
    """
    A function that produces the list of URLs from which the binary archive for the
    given version of Maven may be downloaded, in the order they should be tried.  Snapshot
    versions only come from Apache's snapshot repository.  Releases come from the
    download CDN, falling back to the release archive for versions the CDN no longer
    carries.

    :param version: the version of Maven wanted.
    :return: the list of candidate URLs.
    :raises ValueError: if the version is not one we know how to find.
    """
    parsed = None

    if INSTALLABLE_VERSION_PATTERN.match(version):
        try:
            parsed = Version(version)
        except ValueError:
            pass

    if parsed is None:
        raise ValueError(f'Unsupported version format: {version}')

    if parsed.is_snapshot:
        return [SNAPSHOT_URL.format(version=version)]

    return [
        PRIMARY_URL.format(major=parsed.major, version=version),
        ARCHIVE_URL.format(major=parsed.major, version=version)
    ]


def install(version: str, destination: Union[str, Path], verify: bool = True):
    """
    A function that downloads, unpacks and lays out the given version of Maven in the
    given directory.  When done, the directory directly contains Maven's ``bin``, ``lib``
    and so on.  No archive is left behind, whether we succeed or not.

    :param version: the version of Maven to install.
    :param destination: the directory to install into.  It is created if need be.
    :param verify: whether released archives should be checked against their published
    checksums.
    :raises ValueError: if anything goes wrong.
    """
    if not version:
        raise ValueError('No version specified.')
    if not destination:
        raise ValueError('No installation path specified.')

    urls = get_download_urls(version)
    destination = Path(destination)
    archive = destination / f'{version}.tar.gz'

    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise ValueError(f'Could not create the installation directory {destination}: {str(error)}')

    url = downloader.download_first(urls, archive)

    if url is None:
        raise ValueError(f'Could not download Maven {version} from any of: {", ".join(urls)}')

    if not archive.is_file():
        raise ValueError(f'Downloaded archive {archive} is missing.')

    if verify and not Version(version).is_snapshot and verify_signature(archive, url) is False:
        remove_file(archive)
        raise ValueError(f'Checksum verification failed for {archive.name} downloaded from {url}.')

    _extract_archive(archive, destination)

    try:
        _flatten(destination / f'{ARCHIVE_DIRECTORY_PREFIX}{version}', destination)
    except OSError as error:
        raise ValueError(f'Could not move Maven {version} into place in {destination}: {str(error)}')

    out(f'Maven {version} installed in {destination}.')


def _extract_archive(archive: Path, destination: Path):
    """
    A function that unpacks the given tarball into the given directory.  The tarball
    is removed afterward, even if extraction fails.

    :param archive: the tarball to unpack.
    :param destination: the directory to unpack into.
    :raises ValueError: if the archive could not be extracted.
    """
    verbose_out(f'Extracting {archive.name} into {destination}')

    try:
        with tarfile.open(str(archive), 'r:gz') as tar:
            tar.extractall(str(destination), filter='data')
    except (tarfile.TarError, OSError) as error:
        raise ValueError(f'Could not extract {archive.name}: {str(error)}')
    finally:
        remove_file(archive)


def _flatten(directory: Path, destination: Path):
    """
    A function that moves everything in the given directory up into the destination
    directory and removes the then empty directory.  Nothing happens if the directory
    does not exist.

    :param directory: the directory to empty out.
    :param destination: the directory to move things into.
    """
    if not directory.is_dir():
        verbose_out(f'No {directory.name} directory to flatten.')
        return

    for path in sorted(directory.iterdir()):
        move_path(path, destination / path.name)

    directory.rmdir()

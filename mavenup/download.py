"""
This file provides all our support for pulling things down from remote servers.
"""
from pathlib import Path
from typing import Callable, Optional, Sequence, TypeVar

import click
import requests
from requests import ConnectionError, HTTPError, RequestException, Timeout
from requests.exceptions import ChunkedEncodingError, ContentDecodingError

from mavenup.config import REQUEST_TIMEOUT, TRANSIENT_STATUS_CODES
from mavenup.utils import global_options, out, pause, remove_file, verbose_out, warn

T = TypeVar("T")


def _is_transient(error: RequestException) -> bool:
    """
    A function that decides whether a failed request is worth trying again.  Connection
    problems and timeouts are, including a connection dropped while the body is streaming,
    as are HTTP responses that indicate a busy or broken server.  Anything else (a 404, for example) will not get better by asking again.

    :param error: the error raised by ``requests``.
    :return: ``True`` if the request should be retried.
    """
    if isinstance(error, (ConnectionError, Timeout, ChunkedEncodingError, ContentDecodingError)):
        return True
    if isinstance(error, HTTPError) and error.response is not None:
        return error.response.status_code in TRANSIENT_STATUS_CODES
    return False


class Downloader(object):
    """
    Instances of this class know how to download remote files and text, retrying
    transient failures.  It is intended to be used as a singleton via the ``downloader``
    module attribute.
    """
    def fetch_text(self, url: str) -> str:
        """
        A function that retrieves the body of the given URL as text.

        :param url: the URL to read.
        :return: the text of the response body.
        :raises ValueError: if the URL could not be read.
        """
        def fetch() -> str:
            response = requests.get(url, allow_redirects=True, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            return response.text

        verbose_out(f'Fetching {url}')

        try:
            return self._with_retries(url, fetch)
        except RequestException as error:
            raise ValueError(f'Could not fetch {url}: {str(error)}')

    def download_first(self, urls: Sequence[str], full_path: Path) -> Optional[str]:
        """
        A function that tries each of the given URLs, in order, until one of them is
        successfully downloaded to the given path.

        :param urls: the candidate URLs for the file.
        :param full_path: the full path to which the file will be downloaded.
        :return: the URL the file came from or ``None`` if none of them worked.
        """
        for url in urls:
            if self.download_file(url, full_path):
                return url
        return None

    def download_file(self, url: str, full_path: Path) -> bool:
        """
        A function for downloading a remote file to a local one.  Transient failures are
        retried as configured by the global options.  If the file cannot be downloaded,
        ``False`` is returned and no partial file is left behind.

        :param url: the URL from which the remote file is to be downloaded.
        :param full_path: the full path to which the file will be downloaded.
        :return: a flag noting whether or not the file was successfully downloaded.
        """
        verbose_out(f'Downloading {url}')

        try:
            self._with_retries(url, lambda: self._download_once(url, full_path))
        except RequestException as error:
            remove_file(full_path)
            warn(f'Could not download {url}: {str(error)}')
            return False

        return True

    @staticmethod
    def _with_retries(url: str, function: Callable[[], T]) -> T:
        """
        A function that calls the given function, calling it again after a fixed delay
        whenever it fails in a transient way.

        :param url: the URL being worked on; used for messages.
        :param function: the function that makes the request.
        :return: whatever the function returns.
        :raises RequestException: the last error, once retries are exhausted or the
        error is not transient.
        """
        attempts = global_options.retries() + 1
        delay = global_options.retry_delay()

        for attempt in range(1, attempts + 1):
            try:
                return function()
            except RequestException as error:
                if attempt == attempts or not _is_transient(error):
                    raise
                warn(f'Attempt {attempt} of {attempts} for {url} failed ({str(error)}); retrying in {delay} seconds.')
                pause(delay)

    @staticmethod
    def _download_once(url: str, full_path: Path):
        """
        A function that makes a single attempt at downloading a URL to a file.  Whatever
        happens, a partially written file is removed before an error propagates.

        :param url: the URL from which the remote file is to be downloaded.
        :param full_path: the full path to which the file will be downloaded.
        """
        response = requests.get(url, allow_redirects=True, stream=True, timeout=REQUEST_TIMEOUT)

        try:
            response.raise_for_status()
            content_length = int(response.headers['Content-Length']) if 'Content-Length' in response.headers \
                else None

            full_path.parent.mkdir(parents=True, exist_ok=True)

            with full_path.open('wb') as fd:
                if global_options.quiet() or content_length is None:
                    for chunk in response.iter_content(chunk_size=1024):
                        fd.write(chunk)
                else:
                    label = Downloader._make_label(full_path.name)
                    with click.progressbar(label=click.style(label, fg='white'), length=content_length,
                                           info_sep=' ', width=0) as bar:
                        for chunk in response.iter_content(chunk_size=1024):
                            fd.write(chunk)
                            bar.update(len(chunk))
        except BaseException:
            remove_file(full_path)
            raise
        finally:
            response.close()

        out(f'Downloaded {full_path.name} from {url}')

    @staticmethod
    def _make_label(name: str, limit: int = 25) -> str:
        """
        A function that makes sure the given name is exactly a set number of characters long.
        This is used to make sure that the name of the file being downloaded fits on the
        screen.  If the name is shorter than the limit, it is right-justified within that
        limit.  If it is too long, the excess, plus 3 characters, is removed from the middle
        of the string and replaced with an ellipsis.

        :param name: the name to guarantee is the set limit characters long.
        :param limit: the limit within which the name should be formatted.  This must always
        be an odd number
        :return: the name, possibly modified to be exactly ``limit`` characters long.
        """
        if len(name) > limit:
            size = (limit - 3) // 2
            label = f'{name[:size]}...{name[-size:]}'
        else:
            label = name.rjust(limit)
        return label


downloader = Downloader()

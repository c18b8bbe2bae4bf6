"""
This library provides a number of low-level utilities.
"""
import shutil
import sys
import time
from pathlib import Path
from typing import Any, Callable, Optional

import click

from mavenup.config import DEFAULT_RETRIES, DEFAULT_RETRY_DELAY

# Types for function references.
Echo = Callable[[str, Any], None]
Sleeper = Callable[[float], None]

# These are function references to facilitate unit testing.
_echo = click.secho
_sleep = time.sleep


class GlobalOptions(object):
    """
    A class that holds all our global information.  This consists of the command
    line options specified by the user that affect how output is produced and how
    hard we try to reach remote servers.
    """
    def __init__(self):
        self._quiet = False
        self._verbose = 0
        self._retries = DEFAULT_RETRIES
        self._retry_delay = DEFAULT_RETRY_DELAY

    def set_quiet(self, value: bool) -> 'GlobalOptions':
        """
        This function sets whether or not the user has requested quiet operation.
        If this is ``True``, normal output will be suppressed.

        :param value: whether or not quiet mode is in force.
        :return: this object, for fluency.
        """
        self._quiet = value
        return self

    def set_verbose(self, value: int) -> 'GlobalOptions':
        """
        This function sets the count of how many times the user specified the verbose
        option.  The higher the number, the more verbose the output.

        :param value: the number indicating verbosity.  Zero means no verbosity.
        :return: this object, for fluency.
        """
        self._verbose = value
        return self

    def set_retries(self, value: int) -> 'GlobalOptions':
        """
        This function sets how many times a transient download failure will be retried
        before we give up on a URL.

        :param value: the number of retries.  Zero means a single attempt.
        :return: this object, for fluency.
        """
        self._retries = value
        return self

    def set_retry_delay(self, value: float) -> 'GlobalOptions':
        """
        This function sets the fixed number of seconds to wait between retries.

        :param value: the delay, in seconds.
        :return: this object, for fluency.
        """
        self._retry_delay = value
        return self

    def quiet(self) -> bool:
        """
        This function returns whether or not the user has requested quiet operation.
        If this is ``True``, normal output will be suppressed.

        :return: whether or not quiet mode is in force.
        """
        return self._quiet

    def verbose(self) -> int:
        """
        This function returns a count of how many times the user specified the verbose
        option.  The higher the number, the more verbose the output.

        :return: a number indicating verbosity.  Zero means no verbosity.
        """
        return self._verbose

    def retries(self) -> int:
        """
        This function returns how many times a transient download failure will be
        retried.

        :return: the number of retries.
        """
        return self._retries

    def retry_delay(self) -> float:
        """
        This function returns the number of seconds to wait between retries.

        :return: the delay, in seconds.
        """
        return self._retry_delay


def remove_directory(directory: Path):
    """
    This function may be used to remove a directory.  If the directory is not currently empty,
    it will iterate over the contents, removing each item.  If the item is a directory, the
    function will recurse on it to remove the entire tree.  If the directory already does not
    exist, we quietly do nothing.

    :param directory: the directory to remove.
    """
    if directory.is_dir():
        for path in directory.iterdir():
            if path.is_dir() and not path.is_symlink():
                remove_directory(path)
            else:
                path.unlink()
        directory.rmdir()


def remove_file(path: Path):
    """
    This function removes the given file if it exists.  A missing file is quietly
    ignored.

    :param path: the file to remove.
    """
    if path.is_file() or path.is_symlink():
        path.unlink()


def move_path(source: Path, target: Path):
    """
    This function moves a file or directory tree to a new location.  A simple rename
    is tried first.  If that fails (typically because the two paths are on different
    file systems), the source is copied to the target and then removed.

    :param source: the file or directory to move.
    :param target: where the file or directory should end up.
    """
    try:
        source.rename(target)
    except OSError as error:
        verbose_out(f'Rename of {source} failed ({error}); copying instead.')

        if source.is_dir() and not source.is_symlink():
            shutil.copytree(str(source), str(target), symlinks=True)
            remove_directory(source)
        else:
            shutil.copy2(str(source), str(target), follow_symlinks=False)
            source.unlink()


def pause(seconds: float):
    """
    This function suspends execution for the given number of seconds.  It exists so
    that tests can avoid really waiting between retries.

    :param seconds: how long to wait.
    """
    if seconds > 0:
        _sleep(seconds)


def out(text: str = '', respect_quiet: bool = True, **kwargs):
    """
    This function is a thin wrapper around ``click.secho`` and will only output the given
    information if the user says it's ok.

    :param text: the text to print out.
    :param respect_quiet: a flag noting whether the ``quiet`` attribute of global options
    should be respected.  If this is ``False``, text will always be output.
    """
    if not (global_options.quiet() and respect_quiet):
        _echo(text, **kwargs)


def verbose_out(text, **kwargs):
    """
    This function is a thin wrapper around ``click.secho`` and will only output the given
    information if the user says it's ok via the verbose attribute of the global options.

    :param text: the text to print out.
    """
    if global_options.verbose() > 0:
        if 'fg' not in kwargs:
            kwargs['fg'] = 'green'
        _echo(text, **kwargs)


def labeled_out(text, label: Optional[str] = None, respect_quiet: bool = True, **kwargs):
    """
    This function is a thin wrapper around ``out`` and will only output the given
    information if the user says it's ok.  If a label is provided, it is prepended to
    the given text.

    :param text: the text to print out.
    :param label: the label, if any, to prepend to the text.
    :param respect_quiet: a flag noting whether the ``quiet`` attribute of global options
    should be respected.  If this is ``False``, text will always be output.
    """
    if label:
        text = f'{label}: {text}'
    out(text, respect_quiet, **kwargs)


def warn(text, label: Optional[str] = 'Warning'):
    """
    This function is a thin wrapper around ``labeled_out`` that writes the given text to
    standard error.  If a label is not provided, it defaults to `Warning'.  Output will
    occur regardless of the ``quiet`` attribute of the global options.

    :param text: the text to print out.
    :param label: the label, if any, to prepend to the text.
    """
    labeled_out(text, label, respect_quiet=False, fg='yellow', err=True)


def end(*args, label: str = 'ERROR', rc=1):
    """
    A function to print messages to the end user as errors and exit.  Each line of
    output will be prepended with the given label, which defaults to ``ERROR`` if it
    is not specified.  Messages go to standard error.

    :param args: the list of lines to print out.
    :param label: the label, if any, to prepend to the text.
    :param rc: the return code to exit with.  This will default to ``1`` if not specified.
    """
    for line in args:
        labeled_out(line, label, respect_quiet=False, fg='bright_red', err=True)
    sys.exit(rc)


def set_echo(echo: Optional[Echo] = None):
    global _echo
    _echo = echo or click.secho


def set_sleeper(sleeper: Optional[Sleeper] = None):
    global _sleep
    _sleep = sleeper or time.sleep


global_options = GlobalOptions()

import click

from mavenup import VERSION
from mavenup.config import DEFAULT_RETRIES, DEFAULT_RETRY_DELAY, INSTALL_PATH_VAR, INSTALL_TYPE_VAR, \
    INSTALL_VERSION_VAR, SUPPORTED_INSTALL_TYPES
from mavenup.install import install as install_maven
from mavenup.utils import global_options, end, out
from mavenup.versions import latest_version, list_versions


@click.group()
@click.option('--quiet', '-q', is_flag=True, help='Suppress normal output.')
@click.option('--verbose', '-v', count=True, help='Produce verbose output.  Repeat for more verbosity.')
@click.option('--retries', type=click.IntRange(min=0), default=DEFAULT_RETRIES, show_default=True,
              help='How many times to retry a download that failed for a transient reason.')
@click.option('--retry-delay', type=click.FloatRange(min=0), default=DEFAULT_RETRY_DELAY, show_default=True,
              help='How many seconds to wait between download retries.')
@click.version_option(version=VERSION, help="Show the version of mavenup and exit.")
def cli(quiet, verbose, retries, retry_delay):
    """
    Use this tool to install Apache Maven on behalf of a version manager.
    """
    global_options.\
        set_quiet(quiet).\
        set_verbose(verbose).\
        set_retries(retries).\
        set_retry_delay(retry_delay)


@cli.command()
@click.option('--version', 'version', envvar=INSTALL_VERSION_VAR, default='', metavar='<version>',
              help=f'The version of Maven to install.  Defaults to ${INSTALL_VERSION_VAR}.')
@click.option('--path', 'path', envvar=INSTALL_PATH_VAR, default='', metavar='<directory>',
              help=f'The directory to install Maven into.  Defaults to ${INSTALL_PATH_VAR}.')
@click.option('--type', 'install_type', envvar=INSTALL_TYPE_VAR, default='version', metavar='<type>',
              help=f'The kind of install requested.  Defaults to ${INSTALL_TYPE_VAR}.')
@click.option('--no-verify', is_flag=True, help='Do not check the archive against its published checksum.')
def install(version, path, install_type, no_verify):
    """
    Download and install a version of Maven.
    """
    if install_type not in SUPPORTED_INSTALL_TYPES:
        end(f'Install type "{install_type}" is not supported; only released versions can be installed.')

    try:
        install_maven(version, path, verify=not no_verify)
    except ValueError as error:
        end(error.args[0])


@cli.command()
def latest():
    """
    Print the newest version of Maven.
    """
    try:
        version = latest_version()
    except ValueError as error:
        end(error.args[0])
    else:
        if version:
            out(version, respect_quiet=False)


@cli.command(name='list-all')
def list_all():
    """
    Print all versions of Maven, oldest first.
    """
    try:
        out(' '.join(list_versions()), respect_quiet=False)
    except ValueError as error:
        end(error.args[0])

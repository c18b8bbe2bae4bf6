"""
This file provides all our needed configuration: where Maven lives on the network,
which environment variables the hosting version manager gives us and how hard we
try to download things.
"""
import re

# Environment variables set by the hosting version manager.
INSTALL_VERSION_VAR = 'ASDF_INSTALL_VERSION'
INSTALL_PATH_VAR = 'ASDF_INSTALL_PATH'
INSTALL_TYPE_VAR = 'ASDF_INSTALL_TYPE'
SUPPORTED_INSTALL_TYPES = ('version',)

SNAPSHOT_SUFFIX = '-SNAPSHOT'
ARCHIVE_DIRECTORY_PREFIX = 'apache-maven-'

# noinspection SpellCheckingInspection
PRIMARY_URL = 'https://dlcdn.apache.org/maven/maven-{major}/{version}/binaries/apache-maven-{version}-bin.tar.gz'
ARCHIVE_URL = 'https://archive.apache.org/dist/maven/maven-{major}/{version}/binaries/apache-maven-{version}-bin.tar.gz'
SNAPSHOT_URL = 'https://repository.apache.org/service/local/artifact/maven/redirect' \
               '?r=snapshots&g=org.apache.maven&a=apache-maven&v={version}&e=tar.gz&c=bin'
CHECKSUM_SUFFIX = '.sha512'

HISTORY_URL = 'https://maven.apache.org/docs/history.html'
# A table cell opening with a (possibly bold) 2 or 3 part version, as in "<td><b>3.9.6</b></td>".
HISTORY_VERSION_PATTERN = re.compile(r'<td>(?:<b>)?(\d+\.\d+(?:\.\d+)?)')

# Anything we install must at least start out as "major.minor".
INSTALLABLE_VERSION_PATTERN = re.compile(r'^(\d+)\.\d+')

DEFAULT_RETRIES = 3
DEFAULT_RETRY_DELAY = 5.0
REQUEST_TIMEOUT = 60.0
TRANSIENT_STATUS_CODES = frozenset([408, 429, 500, 502, 503, 504])

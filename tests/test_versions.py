"""
This file contains all the unit tests for finding Maven versions.
"""
from unittest.mock import patch, call

from mavenup.versions import find_versions, latest_version, list_versions
from tests.test_support import get_test_path


def _history() -> str:
    return get_test_path('history.html').read_text(encoding='utf-8')


class TestFindVersions(object):
    def test_find_versions(self):
        assert find_versions(_history()) == ['3.8.1', '3.9.0', '3.6.3', '3.0']

    def test_find_versions_ignores_other_cells(self):
        html = '<td>2023-02-06</td><td>3.9.0</td><td>announce 3.9.1</td>\n<p>3.9.2</p>'

        assert find_versions(html) == ['3.9.0']

    def test_find_versions_empty(self):
        assert find_versions('') == []


class TestLatestVersion(object):
    def test_latest_version(self):
        assert latest_version(_history()) == '3.9.0'

    def test_latest_version_is_numeric(self):
        assert latest_version('<td>3.9.9</td>\n<td>3.10.0</td>\n<td>3.9.10</td>') == '3.10.0'

    def test_latest_version_empty(self):
        assert latest_version('<html></html>') == ''

    def test_latest_version_fetches_history(self):
        with patch('mavenup.versions.downloader') as mock_downloader:
            mock_downloader.fetch_text.return_value = _history()

            assert latest_version() == '3.9.0'

        assert mock_downloader.fetch_text.mock_calls == [call('https://maven.apache.org/docs/history.html')]


class TestListVersions(object):
    def test_list_versions(self):
        assert list_versions(_history()) == ['3.0', '3.6.3', '3.8.1', '3.9.0']

    def test_list_versions_drops_duplicates(self):
        assert list_versions('<td>3.9.0</td>\n<td><b>3.9.0</b></td>\n<td>3.8.8</td>') == ['3.8.8', '3.9.0']

    def test_list_versions_fetches_history(self):
        with patch('mavenup.versions.downloader') as mock_downloader:
            mock_downloader.fetch_text.return_value = '<td>3.9.6</td>'

            assert list_versions() == ['3.9.6']

        assert mock_downloader.fetch_text.mock_calls == [call('https://maven.apache.org/docs/history.html')]

"""
This file contains all the unit tests for our utilities support.
"""
import os
from pathlib import Path
from unittest.mock import patch, MagicMock, call

# noinspection PyPackageRequirements
import pytest

from mavenup.utils import GlobalOptions, remove_directory, remove_file, move_path, pause, out, verbose_out, \
    labeled_out, warn, end, set_sleeper
from tests.test_support import FakeEcho, Options, validate_attributes


class TestGlobalOptions(object):
    def test_global_options_defaults(self):
        options = GlobalOptions()

        validate_attributes(options, {
            '_quiet': False,
            '_verbose': 0,
            '_retries': 3,
            '_retry_delay': 5.0
        })

    def test_quiet(self):
        options = GlobalOptions()

        assert options.quiet() is False

        options.set_quiet(True)

        assert options.quiet() is True

    def test_verbose(self):
        options = GlobalOptions()

        assert options.verbose() == 0

        options.set_verbose(2)

        assert options.verbose() == 2

    def test_retries(self):
        options = GlobalOptions()

        assert options.retries() == 3

        options.set_retries(0)

        assert options.retries() == 0

    def test_retry_delay(self):
        options = GlobalOptions()

        assert options.retry_delay() == 5.0

        options.set_retry_delay(0.5)

        assert options.retry_delay() == 0.5

    def test_fluency(self):
        options = GlobalOptions()

        assert options.set_quiet(True).set_verbose(1).set_retries(1).set_retry_delay(1) is options


class TestFileHelpers(object):
    def test_remove_directory(self, tmpdir):
        root = Path(str(tmpdir)) / 'root'
        nested = root / 'a' / 'b'

        nested.mkdir(parents=True)
        (nested / 'file.txt').write_text('text', encoding='utf-8')
        (root / 'top.txt').write_text('text', encoding='utf-8')

        remove_directory(root)

        assert not root.exists()

        # Make sure a missing directory is quietly ignored.
        remove_directory(root)

    def test_remove_file(self, tmpdir):
        path = Path(str(tmpdir)) / 'file.tar.gz'

        path.write_bytes(b'partial')

        remove_file(path)

        assert not path.exists()

        # Make sure a missing file is quietly ignored.
        remove_file(path)

    def test_move_path_renames(self, tmpdir):
        base = Path(str(tmpdir))
        source = base / 'source'
        target = base / 'target'

        source.mkdir()
        (source / 'file.txt').write_text('text', encoding='utf-8')

        move_path(source, target)

        assert not source.exists()
        assert (target / 'file.txt').read_text(encoding='utf-8') == 'text'

    def test_move_path_copies_directory_when_rename_fails(self, tmpdir):
        base = Path(str(tmpdir))
        source = base / 'source'
        target = base / 'target'

        (source / 'sub').mkdir(parents=True)
        (source / 'sub' / 'file.txt').write_text('text', encoding='utf-8')

        with patch.object(Path, 'rename', side_effect=OSError('Invalid cross-device link')):
            move_path(source, target)

        assert not source.exists()
        assert (target / 'sub' / 'file.txt').read_text(encoding='utf-8') == 'text'

    def test_move_path_copies_file_when_rename_fails(self, tmpdir):
        base = Path(str(tmpdir))
        source = base / 'mvn'
        target = base / 'bin-mvn'

        source.write_text('#!/bin/sh', encoding='utf-8')
        os.chmod(str(source), 0o755)

        with patch.object(Path, 'rename', side_effect=OSError('Invalid cross-device link')):
            move_path(source, target)

        assert not source.exists()
        assert target.read_text(encoding='utf-8') == '#!/bin/sh'
        assert os.access(str(target), os.X_OK)


class TestPause(object):
    def test_pause_sleeps(self):
        sleeper = MagicMock()

        set_sleeper(sleeper)

        try:
            pause(2.5)
            pause(0)
        finally:
            set_sleeper()

        assert sleeper.mock_calls == [call(2.5)]


class TestOutput(object):
    def test_out(self):
        with FakeEcho.simple('Some text', fg='white'):
            out('Some text', fg='white')

        with Options(quiet=True):
            with FakeEcho() as fe:
                out('Some text', fg='white')

            assert not fe.was_called()

            with FakeEcho.simple('Some text', fg='white'):
                out('Some text', respect_quiet=False, fg='white')

    def test_verbose_out(self):
        with FakeEcho() as fe:
            verbose_out('Some text')

        assert not fe.was_called()

        with Options(verbose=1):
            with FakeEcho.simple('Some text', fg='green'):
                verbose_out('Some text')

            with FakeEcho.simple('Some text', fg='blue'):
                verbose_out('Some text', fg='blue')

    def test_labeled_out(self):
        with FakeEcho.simple('Some text'):
            labeled_out('Some text')

        with FakeEcho.simple('Label: Some text'):
            labeled_out('Some text', 'Label')

    def test_warn(self):
        with Options(quiet=True):
            with FakeEcho.simple('Warning: Some text', fg='yellow', err=True):
                warn('Some text')

            with FakeEcho.simple('Oops: Some text', fg='yellow', err=True):
                warn('Some text', 'Oops')

    def test_end(self):
        with FakeEcho.simple('ERROR: Some text', fg='bright_red', err=True):
            with pytest.raises(SystemExit) as info:
                end('Some text')

        assert info.value.code == 1

        with FakeEcho.simple('Bad: Some text', fg='bright_red', err=True):
            with pytest.raises(SystemExit) as info:
                end('Some text', label='Bad', rc=2)

        assert info.value.code == 2

"""Tests for Homebrew access."""
import subprocess
from unittest.mock import Mock, patch

from cppsetup.services.package_manager import PackageManager


class TestIsAvailable:
    """Package manager presence check."""

    @patch('subprocess.run')
    def test_available(self, mock_run):
        mock_run.return_value = Mock(returncode=0)

        assert PackageManager().is_available() is True
        assert mock_run.call_args[0][0] == ['brew', '--version']

    @patch('subprocess.run')
    def test_not_on_path(self, mock_run):
        mock_run.side_effect = FileNotFoundError("brew")
        assert PackageManager().is_available() is False

    @patch('subprocess.run')
    def test_command_not_found_status(self, mock_run):
        mock_run.return_value = Mock(returncode=127)
        assert PackageManager().is_available() is False


class TestToolQueries:
    """Per-tool install state and installation."""

    @patch('subprocess.run')
    def test_is_installed(self, mock_run):
        mock_run.return_value = Mock(returncode=0)

        assert PackageManager().is_installed("cmake") is True
        assert mock_run.call_args[0][0] == ['brew', 'ls', '--versions', 'cmake']

    @patch('subprocess.run')
    def test_not_installed(self, mock_run):
        mock_run.return_value = Mock(returncode=1)
        assert PackageManager().is_installed("ninja") is False

    @patch('subprocess.run')
    def test_install_success(self, mock_run):
        mock_run.return_value = Mock(returncode=0)

        assert PackageManager().install("wget") is True
        assert mock_run.call_args[0][0] == ['brew', 'install', 'wget']
        assert mock_run.call_args[1]['check'] is False

    @patch('subprocess.run')
    def test_install_failure(self, mock_run):
        mock_run.return_value = Mock(returncode=1)
        assert PackageManager().install("wget") is False

    @patch('subprocess.run')
    def test_custom_executable(self, mock_run):
        mock_run.return_value = Mock(returncode=0)
        PackageManager(executable="/opt/homebrew/bin/brew").install("ninja")
        assert mock_run.call_args[0][0][0] == "/opt/homebrew/bin/brew"


class TestMockMode:
    """Mock mode never shells out."""

    @patch('subprocess.run')
    def test_no_subprocess_calls(self, mock_run):
        manager = PackageManager(mock=True)

        assert manager.is_available() is True
        assert manager.is_installed("cmake") is True
        assert manager.install("cmake") is True
        mock_run.assert_not_called()


class TestSubprocessHandling:
    """How subprocess results and errors are mapped."""

    def test_install_error_is_failure(self):
        with patch('subprocess.run', side_effect=PermissionError("denied")):
            assert PackageManager().install("cmake") is False

    def test_query_output_discarded(self):
        with patch('subprocess.run', return_value=Mock(returncode=0)) as mock_run:
            PackageManager().is_installed("cmake")
        assert mock_run.call_args[1]['stdout'] is subprocess.DEVNULL

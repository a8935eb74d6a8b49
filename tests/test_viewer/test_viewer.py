"""Tests for handing cached files to a viewer."""

import webbrowser
from unittest.mock import MagicMock, patch

import pytest

from entrycache.errors.exceptions import ViewerError
from entrycache.viewer import open_in_viewer


class TestOpenInViewer:
    def test_opens_file_uri(self, tmp_path):
        path = tmp_path / "entry.html"
        path.write_text("<p>hi</p>")
        browser = MagicMock()
        browser.open.return_value = True
        with patch("entrycache.viewer.webbrowser.get", return_value=browser) as get:
            open_in_viewer(path)
        get.assert_called_once_with(None)
        browser.open.assert_called_once_with(path.as_uri())

    def test_named_viewer(self, tmp_path):
        browser = MagicMock()
        browser.open.return_value = True
        with patch("entrycache.viewer.webbrowser.get", return_value=browser) as get:
            open_in_viewer(tmp_path / "entry.html", viewer="firefox")
        get.assert_called_once_with("firefox")

    def test_unknown_viewer(self, tmp_path):
        with patch(
            "entrycache.viewer.webbrowser.get",
            side_effect=webbrowser.Error("could not locate runnable browser"),
        ), pytest.raises(ViewerError) as exc_info:
            open_in_viewer(tmp_path / "entry.html", viewer="nope")
        assert exc_info.value.viewer == "nope"

    def test_refused_open(self, tmp_path):
        browser = MagicMock()
        browser.open.return_value = False
        with patch("entrycache.viewer.webbrowser.get", return_value=browser), pytest.raises(
            ViewerError
        ) as exc_info:
            open_in_viewer(tmp_path / "entry.html")
        assert exc_info.value.path == (tmp_path / "entry.html").absolute()

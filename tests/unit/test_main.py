from unittest.mock import MagicMock, patch

import pytest

from visadocs import main as entry_point


class TestMain:
    @patch("visadocs.main.close_pool")
    @patch("visadocs.main.Worker")
    @patch("visadocs.main.build_processor")
    @patch("visadocs.main.apply_schema")
    @patch("visadocs.main.init_pool")
    def test_closes_processor_and_pool_on_exit(
        self,
        _init_pool: MagicMock,
        _apply_schema: MagicMock,
        mock_build_processor: MagicMock,
        _worker: MagicMock,
        mock_close_pool: MagicMock,
    ) -> None:
        entry_point.main()

        mock_build_processor.return_value.close.assert_called_once()
        mock_close_pool.assert_called_once()

    @patch("visadocs.main.close_pool")
    @patch("visadocs.main.build_processor")
    @patch("visadocs.main.apply_schema", side_effect=RuntimeError("db down"))
    @patch("visadocs.main.init_pool")
    def test_closes_pool_when_startup_fails(
        self,
        _init_pool: MagicMock,
        _apply_schema: MagicMock,
        mock_build_processor: MagicMock,
        mock_close_pool: MagicMock,
    ) -> None:
        with pytest.raises(RuntimeError, match="db down"):
            entry_point.main()

        mock_build_processor.assert_not_called()
        mock_close_pool.assert_called_once()

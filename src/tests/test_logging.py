import logging
from unittest.mock import patch

from fastapi.testclient import TestClient

import main


@patch("main.setup_logging_to_console")
def test_setup_logging_sets_root_level(mock_console):
    root_logger = logging.getLogger()
    previous_level = root_logger.level
    try:
        root_logger.setLevel(logging.WARNING)
        with patch.object(main.settings, "LOG_LEVEL", "INFO"), patch.object(
            main.settings, "SEQ_SERVER_URL", None
        ), patch.object(main.settings, "LOG_TO_FILE", False):
            main.setup_logging()

        assert root_logger.level == logging.INFO
        mock_console.assert_called_once_with(logging.INFO)
    finally:
        root_logger.setLevel(previous_level)


@patch("main.init_db")
@patch("main.create_db_and_tables")
@patch("main.setup_logging")
def test_lifespan_sets_up_logging(mock_setup_logging, mock_create_tables, mock_init_db):
    with TestClient(main.app):
        pass

    mock_setup_logging.assert_called_once()
    mock_create_tables.assert_called_once()

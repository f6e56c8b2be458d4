"""
Test Suite for Training Progress Logging.
"""

import re
from unittest.mock import MagicMock

import pytest
import torch
import torch.nn as nn

from neuralclf.core import ClassifierConfig
from neuralclf.core.logger import (
    Logger,
    format_epoch_metrics,
    log_epoch_metrics,
    log_fit_summary,
)

# Matches the "%Y-%m-%d %H:%M:%S" datefmt installed by Logger
STAMP = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"


@pytest.fixture
def metrics():
    return {"loss": 0.123456, "accuracy": 0.5, "val_loss": 1.0, "val_accuracy": 0.98766}


@pytest.mark.unit
def test_format_epoch_metrics(metrics):
    """Values are rendered with four decimals in a fixed order."""
    assert format_epoch_metrics(metrics) == (
        "loss: 0.1235 - accuracy: 0.5000 - val_loss: 1.0000 - val_accuracy: 0.9877"
    )


@pytest.mark.unit
def test_log_epoch_metrics_emits_two_lines(metrics):
    """The epoch counter precedes the metrics line."""
    log = MagicMock()

    log_epoch_metrics(2, 5, metrics, logger_instance=log)

    messages = [c.args[0] for c in log.info.call_args_list]
    assert messages == ["Epoch: 2/5", format_epoch_metrics(metrics)]


@pytest.mark.unit
def test_epoch_report_carries_logger_prefixes(tmp_path, metrics):
    """Records written through Logger handlers gain timestamp and level prefixes."""
    log_dir = tmp_path / "logs"
    log = Logger(name="test_epoch_report", log_dir=log_dir, log_to_file=True).get_logger()

    log_epoch_metrics(1, 2, metrics, logger_instance=log)

    lines = next(log_dir.glob("test_epoch_report_*.log")).read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert re.fullmatch(STAMP + r" - INFO - Epoch: 1/2", lines[0])
    assert re.fullmatch(STAMP + " - INFO - " + re.escape(format_epoch_metrics(metrics)), lines[1])


@pytest.mark.unit
def test_log_fit_summary_is_debug_only():
    """The setup summary never reaches INFO."""
    net = nn.Linear(2, 2)
    cfg = ClassifierConfig(model=net, device=torch.device("cpu"), random_seed=3)
    log = MagicMock()

    log_fit_summary(cfg, n_train=90, n_val=10, n_classes=2, logger_instance=log)

    log.info.assert_not_called()
    debug_text = " ".join(c.args[0] for c in log.debug.call_args_list)
    assert "Linear" in debug_text
    assert "90 train / 10 val" in debug_text
    assert "Adam" in debug_text

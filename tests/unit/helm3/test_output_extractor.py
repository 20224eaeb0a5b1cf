"""Tests for output capture."""

from pathlib import Path
from unittest.mock import MagicMock, call

import pytest

from src.helm3.errors import OutputResolutionFailed, OutputWriteFailed
from src.helm3.models import OutputDeclaration
from src.helm3.outputs import OutputDirectorySink, OutputExtractor
from src.infra.k8s.controller import SecretLookupError

OUTPUTS = [
    OutputDeclaration(name="first", secret="creds", key="user"),
    OutputDeclaration(name="second", secret="creds", key="password"),
    OutputDeclaration(name="third", secret="other", key="token"),
]


class TestOutputExtractor:
    """Tests for OutputExtractor.extract_all."""

    @pytest.fixture
    def secrets(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def extractor(self, secrets: MagicMock, spy_sink: MagicMock) -> OutputExtractor:
        return OutputExtractor(secrets, spy_sink)

    def test_delivers_every_output_in_order(
        self, extractor: OutputExtractor, secrets: MagicMock, spy_sink: MagicMock
    ) -> None:
        secrets.get_secret_value.side_effect = [b"admin", b"hunter2", b"tok"]

        extractor.extract_all("mysql", OUTPUTS)

        assert secrets.get_secret_value.call_args_list == [
            call("mysql", "creds", "user"),
            call("mysql", "creds", "password"),
            call("mysql", "other", "token"),
        ]
        assert spy_sink.write_output.call_args_list == [
            call("first", b"admin"),
            call("second", b"hunter2"),
            call("third", b"tok"),
        ]

    def test_lookup_failure_stops_after_delivering_earlier_outputs(
        self, extractor: OutputExtractor, secrets: MagicMock, spy_sink: MagicMock
    ) -> None:
        lookup_error = SecretLookupError("mysql", "creds", "password", "key not found")
        secrets.get_secret_value.side_effect = [b"admin", lookup_error]

        with pytest.raises(OutputResolutionFailed) as excinfo:
            extractor.extract_all("mysql", OUTPUTS)

        assert excinfo.value.output_name == "second"
        assert excinfo.value.cause is lookup_error
        spy_sink.write_output.assert_called_once_with("first", b"admin")
        assert secrets.get_secret_value.call_count == 2

    def test_sink_failure_is_distinct_from_lookup_failure(
        self, extractor: OutputExtractor, secrets: MagicMock, spy_sink: MagicMock
    ) -> None:
        secrets.get_secret_value.return_value = b"value"
        spy_sink.write_output.side_effect = PermissionError("read-only")

        with pytest.raises(OutputWriteFailed) as excinfo:
            extractor.extract_all("mysql", OUTPUTS)

        assert excinfo.value.output_name == "first"
        assert isinstance(excinfo.value.__cause__, PermissionError)
        assert secrets.get_secret_value.call_count == 1

    def test_no_outputs_touches_nothing(
        self, extractor: OutputExtractor, secrets: MagicMock, spy_sink: MagicMock
    ) -> None:
        extractor.extract_all("mysql", [])

        secrets.get_secret_value.assert_not_called()
        spy_sink.write_output.assert_not_called()


class TestOutputDirectorySink:
    """Tests for the file-backed output sink."""

    def test_writes_one_file_per_output(self, tmp_path: Path) -> None:
        sink = OutputDirectorySink(tmp_path / "outputs")

        sink.write_output("mysql-password", b"hunter2")

        assert (tmp_path / "outputs" / "mysql-password").read_bytes() == b"hunter2"

    def test_overwrites_existing_value(self, tmp_path: Path) -> None:
        sink = OutputDirectorySink(tmp_path)
        sink.write_output("token", b"old")

        sink.write_output("token", b"new")

        assert (tmp_path / "token").read_bytes() == b"new"

"""Tests for the logging adapter."""

from bundlecache.adapters import StdLoggerAdapter


def test_fields_rendered_as_key_value(capsys) -> None:
    logger = StdLoggerAdapter(name="bundlecache.test.fields", level="DEBUG")

    logger.info("Uploading bundle to S3...", bucket="ci-cache", key="app_abc_amd64.tar.gz")

    err = capsys.readouterr().err
    assert "INFO" in err
    assert "Uploading bundle to S3... bucket=ci-cache key=app_abc_amd64.tar.gz" in err


def test_level_filters_debug(capsys) -> None:
    logger = StdLoggerAdapter(name="bundlecache.test.level", level="INFO")

    logger.debug("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_log_operation(capsys) -> None:
    logger = StdLoggerAdapter(name="bundlecache.test.operation")

    logger.log_operation(
        op="upload",
        key="app_abc_amd64.tar.gz",
        sizes={"archive": 2048},
        durations={"total": 1.5},
    )

    err = capsys.readouterr().err
    assert "op=upload key=app_abc_amd64.tar.gz size_archive=2048 duration_total=1.500s" in err

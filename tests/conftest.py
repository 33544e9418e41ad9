import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    logger.remove()


@pytest.fixture
def log_records():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def make_site(tmp_path):
    """Return a factory laying out a site under tmp_path.

    The factory returns (source_dir, static_dir, output_dir, config_path).
    """

    def _make(templates=None, content=None, static=None, config='title = "Hi"\n'):
        source = tmp_path / "content"
        static_dir = tmp_path / "static"
        output = tmp_path / "html"
        config_path = tmp_path / "tinytemple.toml"
        source.mkdir(parents=True, exist_ok=True)
        static_dir.mkdir(parents=True, exist_ok=True)
        if config is not None:
            config_path.write_text(config, encoding="utf-8")
        for name, body in (templates or {}).items():
            path = source / f"{name}.hbs"
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(body, encoding="utf-8")
        for name, body in (content or {}).items():
            path = source / f"{name}.md"
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(body, encoding="utf-8")
        for rel, data in (static or {}).items():
            path = static_dir / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        return source, static_dir, output, config_path

    return _make

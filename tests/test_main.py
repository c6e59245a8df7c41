import logging

import mimesig
import mimesig.server


class StubServer:
    def __init__(self, config):
        self.config = config

    def start(self):
        pass


def test_config_file_errors_reach_the_log_file(tmp_path, monkeypatch):
    config_file = tmp_path / "mimesig.json"
    config_file.write_text("[1, 2]")
    log_dir = tmp_path / "logs"

    monkeypatch.setenv("MIMESIG_CONFIG", str(config_file))
    monkeypatch.setenv("MIMESIG_LOG_DIR", str(log_dir))
    monkeypatch.setattr("sys.argv", ["mimesig-mcp", str(tmp_path)])
    monkeypatch.setattr(mimesig.server, "MimeSigMCPServer", StubServer)

    logger = logging.getLogger("mimesig")
    try:
        mimesig.main()
        for handler in logger.handlers:
            handler.flush()
        assert "Ignoring configuration file" in (log_dir / "mimesig.log").read_text()
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

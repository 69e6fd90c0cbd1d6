from climber import utils


def test_program_invocation_on_path(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/usr/local/bin/climber"])
    monkeypatch.setattr(utils.shutil, "which", lambda script: script)
    assert utils.get_program_invocation() == "climber"


def test_program_invocation_as_module(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/src/climber/__main__.py"])
    monkeypatch.setattr(utils.shutil, "which", lambda script: None)
    assert utils.get_program_invocation() == "python -m climber"


def test_running_in_container_without_cgroup(monkeypatch):
    def missing(self, encoding=None):
        raise FileNotFoundError(self)

    monkeypatch.setattr(utils.Path, "read_text", missing)
    assert utils.running_in_container() is False


def test_running_in_container_with_docker(monkeypatch):
    monkeypatch.setattr(
        utils.Path, "read_text", lambda self, encoding=None: "0::/docker/1"
    )
    assert utils.running_in_container() is True

import pytest

from core.user_data import linux_user_data, load_commands


def test_load_commands_skips_shebang_comments_and_blank_lines(tmp_path):
    script = tmp_path / "boot.sh"
    script.write_text(
        "#!/bin/bash\n"
        "# install packages\n"
        "set -euo pipefail\n"
        "\n"
        "dnf install -y httpd\n"
        "if true; then\n"
        "  systemctl start httpd\n"
        "fi\n"
    )

    assert load_commands(script) == [
        "set -euo pipefail",
        "dnf install -y httpd",
        "if true; then",
        "  systemctl start httpd",
        "fi",
    ]


def test_load_commands_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_commands(tmp_path / "missing.sh")


def test_load_commands_without_commands(tmp_path):
    script = tmp_path / "empty.sh"
    script.write_text("#!/bin/bash\n# nothing to do\n\n")

    with pytest.raises(ValueError):
        load_commands(script)


def test_linux_user_data_appends_scripts_in_order(tmp_path):
    first = tmp_path / "first.sh"
    first.write_text("#!/bin/bash\necho first\n")
    second = tmp_path / "second.sh"
    second.write_text("#!/bin/bash\necho second\n")

    rendered = linux_user_data(first, str(second)).render()

    assert rendered.startswith("#!/bin/bash")
    assert rendered.index("echo first") < rendered.index("echo second")

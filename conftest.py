import pytest


@pytest.fixture
def sample_config_text():
    """YAML for a vertebrate-mitochondrial job that resolves ambiguity codes."""
    return (
        "seqalgebra:\n"
        "  translation:\n"
        "    table: 2\n"
        "    redundant: resolve\n"
        "    to_stop: true\n"
    )


@pytest.fixture
def sample_config_file(tmp_path, sample_config_text):
    """Fixture to write the sample configuration to a temporary .yaml file."""
    file_path = tmp_path / "seqalgebra.yaml"
    file_path.write_text(sample_config_text, encoding="utf-8")
    return file_path

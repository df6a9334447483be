from pathlib import Path

from string_extractor.config import API_KEY_ENV, ExtractionConfig, api_key


def test_resolve_without_directory_turns_recursive_off():
    config = ExtractionConfig(input_file=Path('A.java'), recursive=True).resolve()
    assert not config.recursive


def test_resolve_asks_which_input_to_use():
    both = ExtractionConfig(input_file=Path('A.java'), scan_dir=Path('src'))
    assert both.resolve(lambda q: True).recursive
    assert not both.resolve(lambda q: False).recursive
    assert not both.resolve().recursive


def test_resolve_asks_for_recursive_mode():
    questions = []

    def confirm(question):
        questions.append(question)
        return True

    config = ExtractionConfig(scan_dir=Path('src')).resolve(confirm)
    assert config.recursive
    assert len(questions) == 1
    assert not ExtractionConfig(scan_dir=Path('src')).resolve().recursive


def test_from_payload():
    ok, config = ExtractionConfig.from_payload({
        'input_file': 'app/Main.java',
        'xml_file': 'res/values/strings.xml',
        'prefix': 'app_str',
        'backup_original': True,
    })
    assert ok
    assert config.input_file == Path('app/Main.java')
    assert config.xml_file == Path('res/values/strings.xml')
    assert config.prefix == 'app_str'
    assert config.backup_original
    assert not config.recursive


def test_from_payload_directory_defaults_to_recursive():
    ok, config = ExtractionConfig.from_payload({'scan_dir': 'app/src'})
    assert ok
    assert config.recursive


def test_from_payload_errors():
    assert ExtractionConfig.from_payload([]) == (False, 'payload must be a JSON object')
    assert ExtractionConfig.from_payload({}) == (False, 'missing input_file or scan_dir')
    assert ExtractionConfig.from_payload({'input_file': 'a', 'recursive': 'yes'}) == \
        (False, 'recursive must be a boolean')
    assert ExtractionConfig.from_payload({'input_file': 'a', 'prefix': 3}) == \
        (False, 'prefix must be a non empty string')
    assert ExtractionConfig.from_payload({'input_file': 'a', 'colour': 'red'}) == \
        (False, 'unknown fields: colour')


def test_api_key_from_environment(monkeypatch):
    monkeypatch.delenv(API_KEY_ENV, raising=False)
    assert api_key() == 'dev-key'
    monkeypatch.setenv(API_KEY_ENV, 'secret')
    assert api_key() == 'secret'

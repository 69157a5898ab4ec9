import pytest
from objectstore.client.exceptions import OutputError
from objectstore.output import (
    PHASE_OP_STRING,
    Output,
    marshal_output,
    print_output,
    unmarshal_output,
    validate_key,
)

def test_marshal_output():
    assert marshal_output("version", "0.1.0") == '{"key":"version","value":"0.1.0"}'

def test_unmarshal_output():
    out = unmarshal_output('{"key":"path","value":"/backups/one/"}')
    assert out == Output(key="path", value="/backups/one/")

def test_unmarshal_output_errors():
    with pytest.raises(OutputError):
        unmarshal_output("not json")
    with pytest.raises(OutputError):
        unmarshal_output('["a", "b"]')

@pytest.mark.parametrize("key", ["key", "KEY_1", "_", "a1b2"])
def test_validate_key_valid(key):
    validate_key(key)

@pytest.mark.parametrize("key,message", [
    ("", "Key should not be empty"),
    ("with-dash", "alphanumeric"),
    ("with space", "alphanumeric"),
    ("slash/key", "alphanumeric"),
    ("abc\n", "alphanumeric"),
])
def test_validate_key_invalid(key, message):
    with pytest.raises(OutputError) as exc_info:
        validate_key(key)
    assert message in str(exc_info.value)

def test_print_output(capsys):
    print_output("snapshot", "id-1234")
    captured = capsys.readouterr()
    assert captured.out == f'{PHASE_OP_STRING} {{"key":"snapshot","value":"id-1234"}}\n'

    line = captured.out.strip()
    assert unmarshal_output(line[len(PHASE_OP_STRING):].strip()) == Output("snapshot", "id-1234")

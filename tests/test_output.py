import io

from newrelic_app_guid.output import format_output, write_output


def test_format_output():
    assert format_output("appGUID", "G1") == "::set-output name=appGUID::G1"


def test_write_output_writes_one_line():
    stream = io.StringIO()
    write_output("MXxBUE18QVBQTElDQVRJT058MTIz", stream=stream)
    assert stream.getvalue() == "::set-output name=appGUID::MXxBUE18QVBQTElDQVRJT058MTIz\n"

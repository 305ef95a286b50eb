"""Tests for writing designspace documents"""

import io
import re
from pathlib import Path

import pytest

import dsdoc
from dsdoc import (
    Axis,
    AxisMapping,
    DesignSpaceDocument,
    DesignSpaceSaveError,
    DesignSpaceSerializeError,
    DesignSpaceWriteError,
    DesignSpaceWriter,
    Dimension,
    Instance,
    Source,
)

DATA_DIR = Path(__file__).parent / "data"


def sample_document() -> DesignSpaceDocument:
    return DesignSpaceDocument(
        format=5.0,
        axes=[
            Axis(
                name="Weight",
                tag="wght",
                default=400,
                minimum=100,
                maximum=900,
                map=[AxisMapping(100, 20), AxisMapping(900, 160.5)],
            ),
            Axis(name="Italic", tag="ital", default=0, values=[0, 1], hidden=True),
        ],
        sources=[
            Source(
                filename="Test-Light.ufo",
                familyname="Test",
                stylename="Light",
                location=[Dimension(name="Weight", xvalue=20)],
            ),
        ],
        instances=[
            Instance(
                stylename="Light",
                location=[Dimension(name="Weight", xvalue=20, yvalue=25)],
                lib={"com.example.flag": True},
            ),
        ],
        lib={"com.example.key": "value"},
    )


class TestOutputLayout:
    """Declaration, indentation and trailing newline"""

    def test_xml_declaration(self):
        text = DesignSpaceWriter().write(sample_document())
        assert text.startswith("<?xml version='1.0' encoding='UTF-8'?>\n<designspace")

    def test_single_trailing_newline(self):
        text = DesignSpaceWriter().write(sample_document())
        assert text.endswith("</designspace>\n")
        assert not text.endswith("\n\n")

    def test_two_space_indentation(self):
        lines = DesignSpaceWriter().write(sample_document()).splitlines()
        assert lines[2] == "  <axes>"
        assert lines[3].startswith('    <axis name="Weight"')
        assert lines[4].startswith('      <map input="100"')
        for line in lines[1:]:
            indent = len(line) - len(line.lstrip(" "))
            assert indent % 2 == 0
            assert "\t" not in line

    def test_dumps_is_utf8(self):
        document = sample_document()
        document.sources[0].stylename = "Léger"
        data = dsdoc.dumps(document)
        assert isinstance(data, bytes)
        assert "Léger".encode("utf-8") in data


class TestElementShapes:
    """Attributes and wrappers"""

    def test_attribute_order_and_number_format(self):
        text = DesignSpaceWriter().write(sample_document())
        assert (
            '<axis name="Weight" tag="wght" default="400" minimum="100" maximum="900">'
            in text
        )
        assert '<map input="900" output="160.5"' in text
        assert '<designspace format="5.0">' in text

    def test_large_numbers_use_exponent_notation(self):
        document = sample_document()
        document.axes[0].default = 1e300
        text = DesignSpaceWriter().write(document)
        assert 'default="1e+300"' in text
        assert dsdoc.loads(text).axes[0].default == 1e300

    def test_whole_numbers_below_exponent_range(self):
        document = sample_document()
        document.axes[0].default = 123456789012345.0
        text = DesignSpaceWriter().write(document)
        assert 'default="123456789012345"' in text

    def test_hidden_and_values(self):
        text = DesignSpaceWriter().write(sample_document())
        assert '<axis name="Italic" tag="ital" default="0" hidden="1" values="0 1"' in text

    def test_absent_attributes_are_omitted(self):
        text = DesignSpaceWriter().write(sample_document())
        source_line = next(line for line in text.splitlines() if "<source " in line)
        assert not re.search(r'\sname="', source_line)
        assert "layer=" not in source_line
        assert "uservalue" not in text
        assert '<dimension name="Weight" xvalue="20" yvalue="25"' in text

    def test_source_attribute_order(self):
        document = sample_document()
        document.sources[0].name = "light"
        document.sources[0].layer = "support"
        text = DesignSpaceWriter().write(document)
        assert (
            '<source familyname="Test" stylename="Light" name="light" '
            'filename="Test-Light.ufo" layer="support">'
        ) in text

    def test_empty_instances_wrapper_is_written(self):
        """Empty instances still get their wrapper element"""
        document = sample_document()
        document.instances = []
        text = DesignSpaceWriter().write(document)
        assert re.search(r"<instances\s*/>|<instances>\s*</instances>", text)

    def test_libs_always_written(self):
        document = sample_document()
        document.lib = {}
        document.instances[0].lib = {}
        text = DesignSpaceWriter().write(document)
        assert text.count("<lib>") == 2
        assert re.search(r"<dict\s*/>", text)

    def test_lib_keys_keep_insertion_order(self):
        document = sample_document()
        document.lib = {"z.last": 1, "a.first": 2}
        text = DesignSpaceWriter().write(document)
        assert text.index("<key>z.last</key>") < text.index("<key>a.first</key>")


class TestSave:
    """Paths, streams and errors"""

    def test_save_to_path(self, tmp_path):
        path = tmp_path / "out.designspace"
        dsdoc.save(sample_document(), path)
        assert path.read_bytes() == dsdoc.dumps(sample_document())

    def test_save_to_stream(self):
        stream = io.BytesIO()
        dsdoc.save(sample_document(), stream)
        assert not stream.closed
        assert stream.getvalue() == dsdoc.dumps(sample_document())

    def test_document_save_method(self, tmp_path):
        path = tmp_path / "out.designspace"
        sample_document().save(path)
        assert dsdoc.load(path) == sample_document()

    def test_unwritable_path(self, tmp_path):
        path = tmp_path / "missing-dir" / "out.designspace"
        with pytest.raises(DesignSpaceWriteError) as exc_info:
            dsdoc.save(sample_document(), path)
        assert isinstance(exc_info.value, DesignSpaceSaveError)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.path == str(path)

    def test_unserializable_lib_value(self, tmp_path):
        document = sample_document()
        document.lib["com.example.bad"] = object()
        path = tmp_path / "out.designspace"
        with pytest.raises(DesignSpaceSerializeError):
            dsdoc.save(document, path)
        assert not path.exists()

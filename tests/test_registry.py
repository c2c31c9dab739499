"""Tests for the Teleport registry: registration, cross-linking and lookups."""

import pytest

from teleport import Teleport
from teleport.errors import (
    InvalidPluginError,
    LibraryNotLoadedError,
    NoSuchTargetError,
    TargetAlreadyRegisteredError,
    UnrecognizedPluginTypeError,
)
from teleport.models import Generator, Publisher


def _library(name: str = "teleport-elements-core", **overrides) -> dict:
    return {
        "type": "library",
        "name": name,
        "version": overrides.get("version", "0.1.0"),
        "elements": overrides.get(
            "elements",
            {
                "Text": {"type": "Text", "children": "string"},
                "View": {"type": "View", "children": "array"},
            },
        ),
    }


def _mapping(
    name: str = "core-react",
    library: str = "teleport-elements-core",
    target: str = "react",
    **overrides,
) -> dict:
    data = {
        "type": "mapping",
        "name": name,
        "library": library,
        "target": target,
        "maps": overrides.get("maps", {"Text": {"type": "span"}, "View": {"type": "div"}}),
    }
    if "extends" in overrides:
        data["extends"] = overrides["extends"]
    return data


# --- Libraries ---


def test_use_library_and_lookup():
    teleport = Teleport()
    teleport.use_library(_library())

    lib = teleport.library("teleport-elements-core")
    assert lib.name == "teleport-elements-core"
    assert lib.version == "0.1.0"
    assert set(lib.elements) == {"Text", "View"}
    assert lib.element("Text") == {"type": "Text", "children": "string"}


def test_library_not_loaded():
    teleport = Teleport()
    with pytest.raises(LibraryNotLoadedError, match="missing"):
        teleport.library("missing")


def test_library_overwrite_last_write_wins():
    teleport = Teleport()
    teleport.use_library(_library(version="1.0.0"))
    teleport.use_library(_library(version="2.0.0"))

    assert len(teleport.libraries) == 1
    assert teleport.library("teleport-elements-core").version == "2.0.0"


def test_use_library_without_type_key():
    teleport = Teleport()
    teleport.use_library({"name": "bare", "elements": {}})
    assert teleport.library("bare").elements == {}


def test_library_missing_name_rejected():
    teleport = Teleport()
    with pytest.raises(InvalidPluginError, match="name"):
        teleport.use_plugin({"type": "library", "elements": {}})


# --- Targets ---


def test_target_lifecycle():
    teleport = Teleport()
    with pytest.raises(NoSuchTargetError, match="Did you register a mapping or a generator"):
        teleport.target("vue")

    teleport.use_target("vue")
    assert teleport.target("vue").name == "vue"

    with pytest.raises(TargetAlreadyRegisteredError):
        teleport.use_target("vue")


# --- Mappings ---


def test_mapping_auto_creates_target_and_links_both_sides():
    teleport = Teleport()
    teleport.use_library(_library())
    teleport.use_mapping(_mapping())

    mapping = teleport.mapping("core-react")
    target = teleport.target("react")
    library = teleport.library("teleport-elements-core")

    assert mapping is not None
    assert target.mappings["core-react"] is mapping
    assert library.mappings["core-react"] is mapping


def test_mapping_reuses_existing_target():
    teleport = Teleport()
    teleport.use_library(_library())
    teleport.use_target("react")
    existing = teleport.target("react")

    teleport.use_mapping(_mapping())

    assert teleport.target("react") is existing
    assert "core-react" in existing.mappings


def test_mapping_with_unloaded_library_leaves_registry_untouched():
    teleport = Teleport()
    with pytest.raises(LibraryNotLoadedError):
        teleport.use_mapping(_mapping(library="never-loaded"))

    assert teleport.mapping("core-react") is None
    assert "react" not in teleport.targets


def test_mapping_missing_target_field_rejected():
    teleport = Teleport()
    teleport.use_library(_library())
    data = _mapping()
    del data["target"]
    with pytest.raises(InvalidPluginError, match="target"):
        teleport.use_plugin(data)


def test_map_resolves_element():
    teleport = Teleport()
    teleport.use_library(_library())
    teleport.use_mapping(_mapping())

    assert teleport.map("react", "teleport-elements-core", "Text") == {"type": "span"}
    assert teleport.map("react", "teleport-elements-core", "Image") is None
    assert teleport.map("react", "other-library", "Text") is None


def test_map_unknown_target_returns_none():
    teleport = Teleport()
    assert teleport.map("angular", "teleport-elements-core", "Text") is None


def test_map_first_registered_mapping_wins():
    teleport = Teleport()
    teleport.use_library(_library())
    teleport.use_mapping(_mapping(name="first", maps={"Text": {"type": "span"}}))
    teleport.use_mapping(_mapping(name="second", maps={"Text": {"type": "p"}}))

    assert teleport.map("react", "teleport-elements-core", "Text") == {"type": "span"}


def test_mapping_extends_falls_back_to_parent():
    teleport = Teleport()
    teleport.use_library(_library())
    teleport.use_library(_library(name="extra-elements", elements={"Badge": {}}))
    teleport.use_mapping(_mapping(name="core-html", target="html"))
    teleport.use_mapping(
        _mapping(
            name="extra-html",
            library="extra-elements",
            target="html",
            maps={"Badge": {"type": "mark"}},
            extends="core-html",
        )
    )

    extra = teleport.mapping("extra-html")
    assert extra.map("extra-elements", "Badge") == {"type": "mark"}
    assert extra.map("teleport-elements-core", "View") == {"type": "div"}


def test_mapping_extends_cycle_terminates():
    teleport = Teleport()
    teleport.use_library(_library())
    teleport.use_mapping(_mapping(name="a", maps={}, extends="b"))
    teleport.use_mapping(_mapping(name="b", maps={}, extends="a"))

    assert teleport.map("react", "teleport-elements-core", "Text") is None


# --- Generators ---


def test_generator_bidirectional_link():
    teleport = Teleport()
    generator = Generator(name="react-generator", target_name="react")
    teleport.use_generator(generator)

    target = teleport.target("react")
    assert target.generator is generator
    assert generator.target is target
    assert teleport.generator("react-generator") is generator


def test_second_generator_replaces_link():
    teleport = Teleport()
    first = Generator(name="react-a", target_name="react")
    second = Generator(name="react-b", target_name="react")
    teleport.use_generator(first)
    teleport.use_generator(second)

    assert teleport.target("react").generator is second
    assert teleport.generator("react-a") is first


def test_generator_subclass_via_use_plugin():
    class HtmlGenerator(Generator):
        def generate(self, component):
            return f"<div>{component}</div>"

    teleport = Teleport()
    teleport.use_plugin(HtmlGenerator(name="html-generator", target_name="html"))

    assert teleport.target("html").generator.generate("hi") == "<div>hi</div>"


def test_generator_from_payload_has_no_emitter():
    teleport = Teleport()
    teleport.use_plugin({"type": "generator", "name": "vue-generator", "target": "vue"})

    generator = teleport.generator("vue-generator")
    assert generator.target is teleport.target("vue")
    with pytest.raises(NotImplementedError):
        generator.generate({})


# --- Publishers ---


def test_publisher_registration():
    teleport = Teleport()
    publisher = Publisher(name="disk")
    teleport.use_plugin(publisher)

    assert teleport.publisher("disk") is publisher
    assert teleport.publisher("zip") is None
    assert teleport.targets == {}


# --- GUI ---


def test_use_gui_attaches_metadata():
    teleport = Teleport()
    teleport.use_library(_library())
    teleport.use_plugin(
        {
            "type": "gui",
            "library": "teleport-elements-core",
            "elements": {"Text": {"icon": "text.svg"}},
            "palette": ["Text", "View"],
        }
    )

    gui = teleport.library("teleport-elements-core").gui()
    assert gui is not None
    assert gui.elements == {"Text": {"icon": "text.svg"}}
    assert gui.data == {"palette": ["Text", "View"]}


def test_use_gui_named_package():
    teleport = Teleport()
    teleport.use_library(_library())
    teleport.use_gui({"library": "teleport-elements-core", "name": "core-gui"})

    lib = teleport.library("teleport-elements-core")
    assert lib.gui("core-gui").library == "teleport-elements-core"
    assert lib.gui() is None


def test_use_gui_missing_library():
    teleport = Teleport()
    with pytest.raises(LibraryNotLoadedError):
        teleport.use_gui({"library": "missing"})


# --- Dispatch ---


def test_unrecognized_plugin_type():
    teleport = Teleport()
    with pytest.raises(UnrecognizedPluginTypeError):
        teleport.use_plugin({"type": "unknown"})


def test_payload_without_type():
    teleport = Teleport()
    with pytest.raises(UnrecognizedPluginTypeError):
        teleport.use_plugin({"name": "nameless"})


def test_use_methods_chain():
    teleport = Teleport()
    result = teleport.use_library(_library()).use_mapping(_mapping()).use_target("vue")
    assert result is teleport


# --- Transformers ---


def test_transformers_available():
    teleport = Teleport()
    assert teleport.transformers["camelToKebab"]("backgroundColor") == "background-color"

    teleport.register_transformer("upper", str.upper)
    assert teleport.transformers["upper"]("div") == "DIV"

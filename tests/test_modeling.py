from __future__ import annotations

from pyvocab.modeling import (
    Declaration,
    DeclarationLike,
    ModelFile,
    ModelFileLike,
    ModelManager,
    ModelProviderLike,
    Property,
)


def test_declaration_accepts_property_names() -> None:
    decl = Declaration(name="Truck", properties=["weight", Property(name="wheels")])
    assert [p.name for p in decl.get_own_properties()] == ["weight", "wheels"]


def test_model_file_local_type() -> None:
    model_file = ModelFile.from_mapping("org.acme", {"Truck": ["weight"], "Color": []})
    truck = model_file.get_local_type("Truck")
    assert truck is not None
    assert [p.name for p in truck.get_own_properties()] == ["weight"]
    assert model_file.get_local_type("Bus") is None
    assert [d.name for d in model_file.get_all_declarations()] == ["Truck", "Color"]


def test_model_manager_registry() -> None:
    manager = ModelManager.from_mapping({"org.a": {}, "org.b": {"Thing": []}})
    assert [m.namespace for m in manager.get_model_files()] == ["org.a", "org.b"]
    assert manager.get_model_file("org.b") is not None
    assert manager.get_model_file("org.c") is None

    manager.add_model_file(ModelFile(namespace="org.a", declarations=[Declaration(name="X")]))
    replaced = manager.get_model_file("org.a")
    assert replaced is not None
    assert [d.name for d in replaced.get_all_declarations()] == ["X"]


def test_concrete_classes_satisfy_protocols() -> None:
    model_file = ModelFile.from_mapping("org.acme", {"Truck": []})
    assert isinstance(ModelManager([model_file]), ModelProviderLike)
    assert isinstance(model_file, ModelFileLike)
    assert isinstance(model_file.declarations[0], DeclarationLike)

from mdthat.typekey import TypeKey


class A:
    pass


class B:
    pass


def test_typekey_eq():
    assert TypeKey(id=A, name="foo") == TypeKey(id=A, name="bar")
    assert TypeKey(id=A, name="foo") != TypeKey(id=B, name="foo")


def test_typekey_of():
    assert TypeKey.of(A) == TypeKey.of(A)
    assert TypeKey.of(A) != TypeKey.of(B)


def test_typekey_in_set():
    keys = {TypeKey.of(A), TypeKey.of(B)}
    assert TypeKey.of(A) in keys
    assert TypeKey(id=A, name="other") in keys
    assert len(keys) == 2


def test_typekey_prints_name():
    key = TypeKey.of(A)
    assert repr(key) == f"{A.__module__}.A"
    assert str(TypeKey(id=A, name="foo")) == "foo"
"""Unit tests for domain enums."""

from lazy_di.domain.enums import RESERVED_NAMES, ContainerOperation


class TestContainerOperation:
    """Test cases for the ContainerOperation enum."""

    def test_operation_values(self):
        """Test that each operation maps to its method name."""
        assert ContainerOperation.ADD.value == "add"
        assert ContainerOperation.UPDATE.value == "update"
        assert ContainerOperation.GET.value == "get"
        assert ContainerOperation.HAS.value == "has"
        assert ContainerOperation.EXTEND.value == "extend"
        assert ContainerOperation.MERGE.value == "merge"
        assert ContainerOperation.CLONE.value == "clone"

    def test_operation_is_string(self):
        """Test that operations compare equal to plain strings."""
        assert ContainerOperation.MERGE == "merge"
        assert isinstance(ContainerOperation.MERGE, str)

    def test_operation_str(self):
        """Test string representation of an operation."""
        assert str(ContainerOperation.CLONE) == "clone"


class TestReservedNames:
    """Test cases for the RESERVED_NAMES constant."""

    def test_reserved_names_cover_all_operations(self):
        """Test that every operation is reserved."""
        assert RESERVED_NAMES == {operation.value for operation in ContainerOperation}

    def test_reserved_names_is_immutable(self):
        """Test that the reserved names cannot be altered at runtime."""
        assert isinstance(RESERVED_NAMES, frozenset)

    def test_reserved_names_match_container_methods(self):
        """Test that every reserved name is a public container method."""
        from lazy_di import DIContainer

        for name in RESERVED_NAMES:
            assert callable(getattr(DIContainer, name))

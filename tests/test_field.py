"""Tests for field paths and validation error values."""

import pytest

from fieldguard.field import (
    ErrorType,
    FieldPath,
    ValidationAggregateError,
    ValidationErrorList,
    invalid,
    required,
)


class TestFieldPath:
    def test_dotted_children(self):
        assert str(FieldPath.new("spec", "secretRef").child("name")) == "spec.secretRef.name"

    def test_index_and_key_segments(self):
        path = FieldPath.new("spec").child("workers").index(2).child("labels").key("app")
        assert str(path) == "spec.workers[2].labels[app]"

    def test_child_does_not_mutate_parent(self):
        parent = FieldPath.new("spec")
        parent.child("name")
        assert str(parent) == "spec"

    def test_empty_path(self):
        assert FieldPath().is_empty()
        assert str(FieldPath()) == "<nil>"

    def test_paths_compare_by_value(self):
        assert FieldPath.new("a", "b") == FieldPath.new("a").child("b")


class TestValidationError:
    def test_required_message(self):
        error = required(FieldPath.new("spec", "name"), "must provide a name")
        assert error.type is ErrorType.REQUIRED
        assert str(error) == "spec.name: Required value: must provide a name"

    def test_invalid_quotes_string_values(self):
        error = invalid(FieldPath.new("spec", "name"), "a--b", "bad")
        assert str(error) == 'spec.name: Invalid value: "a--b": bad'

    def test_invalid_formats_numbers_plainly(self):
        error = invalid(FieldPath.new("spec", "replicas"), 3, "too many")
        assert str(error) == "spec.replicas: Invalid value: 3: too many"

    def test_errors_are_immutable(self):
        error = required(FieldPath.new("x"), "d")
        with pytest.raises(AttributeError):
            error.detail = "other"


class TestValidationErrorList:
    def test_empty_list_has_no_aggregate(self):
        assert ValidationErrorList().to_aggregate() is None

    def test_single_error_aggregate(self):
        errors = ValidationErrorList([required(FieldPath.new("a"), "x")])
        aggregate = errors.to_aggregate()

        assert isinstance(aggregate, ValidationAggregateError)
        assert str(aggregate) == "a: Required value: x"

    def test_aggregate_collapses_duplicate_messages(self):
        error = required(FieldPath.new("a"), "x")
        other = invalid(FieldPath.new("b"), "v", "y")
        errors = ValidationErrorList([error, other, error])

        assert len(errors) == 3
        assert str(errors.to_aggregate()) == '[a: Required value: x, b: Invalid value: "v": y]'


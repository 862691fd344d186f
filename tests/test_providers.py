from precisely import assert_that, contains_exactly, equal_to, has_attrs, is_sequence
import pytest

import graphcompose as g


def test_fields_are_collected_from_decorated_methods_in_declaration_order():
    class UserQueries(g.FieldProvider):
        @g.resolver(g.String, params=(g.param("id", g.ID), ))
        def user(self, args, context):
            return "user " + args.id

        def helper(self):
            return None

        @g.resolver(g.ListType(g.String))
        def users(self, args, context):
            return []

    assert_that(UserQueries.fields(), is_sequence(
        has_attrs(name="user", type=g.String),
        has_attrs(name="users", type=g.ListType(g.String)),
    ))


def test_field_name_can_be_set_explicitly():
    class UserQueries(g.FieldProvider):
        @g.resolver(g.String, name="current_user")
        def resolve_current_user(self, args, context):
            return "Bob"

    assert_that(UserQueries.fields(), is_sequence(has_attrs(name="current_user")))


def test_description_defaults_to_docstring():
    class UserQueries(g.FieldProvider):
        @g.resolver(g.String)
        def user(self, args, context):
            """
            The user with the given ID.
            """

        @g.resolver(g.String, description="All users.")
        def users(self, args, context):
            """
            Ignored.
            """

        @g.resolver(g.String)
        def viewer(self, args, context):
            pass

    assert_that(UserQueries.fields(), is_sequence(
        has_attrs(name="user", description="The user with the given ID."),
        has_attrs(name="users", description="All users."),
        has_attrs(name="viewer", description=None),
    ))


def test_deprecation_reason_is_copied_to_field():
    class UserQueries(g.FieldProvider):
        @g.resolver(g.String, deprecation_reason="Use viewer.")
        def me(self, args, context):
            pass

    assert_that(UserQueries.fields(), is_sequence(
        has_attrs(name="me", deprecation_reason="Use viewer.", is_deprecated=True),
    ))


def test_provider_with_no_fields_has_empty_field_list():
    class EmptyQueries(g.FieldProvider):
        pass

    assert_that(EmptyQueries.fields(), equal_to(()))


def test_fields_of_base_classes_come_first():
    class BaseQueries(g.FieldProvider):
        @g.resolver(g.String)
        def node(self, args, context):
            pass

    class UserQueries(BaseQueries):
        @g.resolver(g.String)
        def user(self, args, context):
            pass

    assert_that(UserQueries.fields(), is_sequence(
        has_attrs(name="node"),
        has_attrs(name="user"),
    ))


def test_overridden_resolver_keeps_position_of_base_field():
    class BaseQueries(g.FieldProvider):
        @g.resolver(g.String)
        def node(self, args, context):
            return "base"

        @g.resolver(g.String)
        def nodes(self, args, context):
            return "base"

    class UserQueries(BaseQueries):
        @g.resolver(g.String)
        def node(self, args, context):
            return "user"

    fields = UserQueries.fields()

    assert_that(fields, is_sequence(has_attrs(name="node"), has_attrs(name="nodes")))
    assert_that(fields[0].resolve(UserQueries(), g.Object({}), None), equal_to("user"))


def test_method_overriding_resolver_without_decorator_is_used_to_resolve_field():
    class BaseQueries(g.FieldProvider):
        @g.resolver(g.String)
        def node(self, args, context):
            """
            Look up a node.
            """
            return "base"

    class UserQueries(BaseQueries):
        def node(self, args, context):
            return "user"

    fields = UserQueries.fields()

    assert_that(fields, is_sequence(has_attrs(name="node", description="Look up a node.")))
    assert_that(fields[0].resolve(UserQueries(), g.Object({}), None), equal_to("user"))
    assert_that(BaseQueries.fields()[0].resolve(BaseQueries(), g.Object({}), None), equal_to("base"))


def test_field_list_is_computed_once_per_provider():
    class UserQueries(g.FieldProvider):
        @g.resolver(g.String)
        def user(self, args, context):
            pass

    assert_that(UserQueries.fields() is UserQueries.fields(), equal_to(True))


def test_declaring_same_field_twice_in_one_provider_is_error():
    class UserQueries(g.FieldProvider):
        @g.resolver(g.String, name="user")
        def user_by_id(self, args, context):
            pass

        @g.resolver(g.String, name="user")
        def user_by_email(self, args, context):
            pass

    error = pytest.raises(g.InvalidProviderError, lambda: UserQueries.fields())

    assert_that(str(error.value), equal_to("UserQueries declares field user more than once"))


def test_type_name_is_class_name_by_default():
    class UserQueries(g.FieldProvider):
        pass

    assert_that(UserQueries.type_name(), equal_to("UserQueries"))


def test_provider_name_overrides_type_name():
    class UserQueries(g.FieldProvider):
        provider_name = "Users"

    assert_that(UserQueries.type_name(), equal_to("Users"))


def test_providers_accept_any_context_by_default():
    class UserQueries(g.FieldProvider):
        pass

    assert_that(UserQueries.context_type, equal_to(g.default_context_type))


class TestDefineProvider(object):
    def test_provider_type_has_given_name_and_fields(self):
        user_field = g.field_descriptor(
            "user",
            type=g.String,
            resolve=lambda provider, args, context: "Bob",
        )

        UserQueries = g.define_provider("UserQueries", fields=(user_field, ))

        assert_that(UserQueries.type_name(), equal_to("UserQueries"))
        assert_that(UserQueries.fields(), contains_exactly(user_field))

    def test_context_type_can_be_set(self):
        class Context(object):
            pass

        UserQueries = g.define_provider("UserQueries", fields=(), context_type=Context)

        assert_that(UserQueries.context_type, equal_to(Context))

    def test_fields_must_be_field_descriptors(self):
        error = pytest.raises(g.InvalidProviderError, lambda: g.define_provider("UserQueries", fields=("user", )))

        assert_that(str(error.value), equal_to("UserQueries was given 'user', expected a FieldDescriptor"))


class TestFieldDescriptor(object):
    def test_field_descriptors_cannot_be_changed(self):
        field = g.field_descriptor("user", type=g.String, resolve=lambda provider, args, context: None)

        pytest.raises(AttributeError, lambda: setattr(field, "name", "users"))

    def test_resolve_must_be_callable(self):
        error = pytest.raises(TypeError, lambda: g.field_descriptor("user", type=g.String, resolve=None))

        assert_that(str(error.value), equal_to("resolve for field user must be callable, was None"))

    def test_invoke_binds_args_and_calls_resolver_with_provider_and_context(self):
        calls = []

        def resolve(provider, args, context):
            calls.append((provider, args, context))
            return "resolved"

        field = g.field_descriptor("user", type=g.String, params=(g.param("id", g.ID), ), resolve=resolve)
        provider = object()
        context = object()

        result = field.invoke(provider, {"id": 42}, context)

        assert_that(result, equal_to("resolved"))
        assert_that(calls, contains_exactly((provider, g.Object({"id": "42"}), context)))

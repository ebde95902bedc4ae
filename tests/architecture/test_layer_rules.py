"""
Layer Rules.

Permanent tests enforcing dependency direction between layers:
- Domain must not access Guards or Application
- Guards must not access Application

These rules use PyTestArch's LayerRule API for declarative enforcement.
"""

from pytestarch import LayerRule


class TestLayerRules:
    """Permanent architecture rules enforcing inward dependencies."""

    def test_domain_does_not_access_guards(self, evaluable, layers):
        """Domain must be pure — no knowledge of guard implementations."""
        rule = (
            LayerRule()
            .based_on(layers)
            .layers_that()
            .are_named("domain")
            .should_not()
            .access_layers_that()
            .are_named("guards")
        )
        rule.assert_applies(evaluable)

    def test_domain_does_not_access_application(self, evaluable, layers):
        """Domain must not know about the namespace facade."""
        rule = (
            LayerRule()
            .based_on(layers)
            .layers_that()
            .are_named("domain")
            .should_not()
            .access_layers_that()
            .are_named("application")
        )
        rule.assert_applies(evaluable)

    def test_guards_do_not_access_application(self, evaluable, layers):
        """Guards are built by the facade, never the other way round."""
        rule = (
            LayerRule()
            .based_on(layers)
            .layers_that()
            .are_named("guards")
            .should_not()
            .access_layers_that()
            .are_named("application")
        )
        rule.assert_applies(evaluable)

"""
Tests for the Pizza lifecycle.
"""

import pytest

from pizzeria.domain.pizza import STAGE_ORDER, OutOfOrderStageError, Pizza, Recipe, Stage


@pytest.fixture
def pizza():
    """A fresh London pepper pizza."""
    return Pizza(
        token="pepper",
        region="London",
        recipe=Recipe("London Pepper Pizza", ("black pepper", "bell pepper")),
    )


class TestPizzaAttributes:
    """Tests for Pizza identity fields."""

    def test_new_pizza_is_created(self, pizza):
        """A new pizza starts at CREATED."""
        assert pizza.stage == Stage.CREATED

    def test_label_encodes_token_and_region(self, pizza):
        """Label is token/region."""
        assert pizza.label == "pepper/London"

    def test_display_name_and_ingredients_come_from_recipe(self, pizza):
        """Recipe fields are exposed on the pizza."""
        assert pizza.display_name == "London Pepper Pizza"
        assert pizza.ingredients == ("black pepper", "bell pepper")

    def test_describe(self, pizza):
        """describe() mentions name, label and stage."""
        text = pizza.describe()
        assert "London Pepper Pizza" in text
        assert "pepper/London" in text
        assert "created" in text


class TestStageOrdering:
    """Tests for strict stage ordering."""

    def test_stages_in_order_reach_boxed(self, pizza):
        """prepare -> bake -> cut -> box never raises."""
        pizza.prepare()
        assert pizza.stage == Stage.PREPARED
        pizza.bake()
        assert pizza.stage == Stage.BAKED
        pizza.cut()
        assert pizza.stage == Stage.CUT
        pizza.box()
        assert pizza.stage == Stage.BOXED

    def test_bake_before_prepare_fails(self, pizza):
        """Baking a fresh pizza is out of order."""
        with pytest.raises(OutOfOrderStageError) as exc_info:
            pizza.bake()
        assert exc_info.value.attempted == Stage.BAKED
        assert exc_info.value.expected == Stage.PREPARED
        assert exc_info.value.actual == Stage.CREATED
        assert pizza.stage == Stage.CREATED

    def test_box_before_cut_fails(self, pizza):
        """Skipping cut is out of order."""
        pizza.prepare()
        pizza.bake()
        with pytest.raises(OutOfOrderStageError):
            pizza.box()
        assert pizza.stage == Stage.BAKED

    def test_stage_cannot_repeat(self, pizza):
        """Each stage runs once."""
        pizza.prepare()
        with pytest.raises(OutOfOrderStageError):
            pizza.prepare()

    def test_no_regression_after_boxed(self, pizza):
        """A boxed pizza cannot go back to any earlier stage."""
        for step in (pizza.prepare, pizza.bake, pizza.cut, pizza.box):
            step()
        for step in (pizza.prepare, pizza.bake, pizza.cut, pizza.box):
            with pytest.raises(OutOfOrderStageError):
                step()
        assert pizza.stage == Stage.BOXED

    def test_error_message_names_label(self, pizza):
        """The error message says which pizza and which stage."""
        with pytest.raises(OutOfOrderStageError) as exc_info:
            pizza.cut()
        assert "pepper/London" in str(exc_info.value)
        assert "cut" in str(exc_info.value)

    def test_stage_order_constant(self):
        """STAGE_ORDER lists every stage once, CREATED first, BOXED last."""
        assert STAGE_ORDER[0] == Stage.CREATED
        assert STAGE_ORDER[-1] == Stage.BOXED
        assert len(set(STAGE_ORDER)) == len(Stage)

    def test_stage_cannot_be_assigned(self, pizza):
        """The stage only moves through the stage methods."""
        for step in (pizza.prepare, pizza.bake, pizza.cut, pizza.box):
            step()
        with pytest.raises(AttributeError):
            pizza.stage = Stage.CREATED
        assert pizza.stage == Stage.BOXED

    def test_stage_not_a_constructor_argument(self):
        """A pizza cannot be built part-way through its lifecycle."""
        with pytest.raises(TypeError):
            Pizza(token="cheese", region="Test", recipe=Recipe("Test"), _stage=Stage.BAKED)

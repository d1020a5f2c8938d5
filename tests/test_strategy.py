"""
Tests for the three creation strategies.
"""

import pytest

from pizzeria.core.catalog import BEIJING_CATALOG, HOUSE, LONDON_CATALOG
from pizzeria.core.pipeline import OrderPipeline
from pizzeria.core.strategy import (
    BeijingKitchen,
    DirectStrategy,
    FamilyStrategy,
    LondonKitchen,
    NoCatalogConfigured,
    RegionalStrategy,
    build_strategy,
)
from pizzeria.domain.models import NotFound
from pizzeria.domain.pizza import Pizza, Stage


class TestDirectStrategy:
    """Tests for DirectStrategy."""

    def test_forwards_to_catalog(self):
        """Direct strategy builds from its one catalog."""
        strategy = DirectStrategy(LONDON_CATALOG)
        assert strategy.region == "London"
        assert strategy.create_product("cheese").label == "cheese/London"

    def test_defaults_to_house_catalog(self):
        """Without a catalog the house menu is used."""
        strategy = DirectStrategy()
        assert strategy.region == HOUSE
        assert isinstance(strategy.create_product("greek"), Pizza)

    def test_unknown_token(self):
        """Unknown tokens come back as NotFound."""
        assert isinstance(DirectStrategy(BEIJING_CATALOG).create_product("bogus"), NotFound)


class TestRegionalStrategy:
    """Tests for RegionalStrategy with kitchen capabilities."""

    def test_region_comes_from_kitchen(self):
        """The kitchen decides the region."""
        assert RegionalStrategy(BeijingKitchen()).region == "Beijing"
        assert RegionalStrategy(LondonKitchen()).region == "London"

    def test_kitchen_builds_its_region(self):
        """Each kitchen builds its own pizzas."""
        pizza = RegionalStrategy(LondonKitchen()).create_product("pepper")
        assert pizza.label == "pepper/London"
        assert pizza.display_name == "London Pepper Pizza"

    def test_unknown_token(self):
        """Kitchens return NotFound for tokens they do not make."""
        result = RegionalStrategy(BeijingKitchen()).create_product("greek")
        assert result == NotFound(token="greek", region="Beijing")

    def test_custom_kitchen(self):
        """Any object with region and create_pizza can be plugged in."""

        class TestKitchen:
            region = "Test"

            def create_pizza(self, token):
                return NotFound(token=token, region=self.region)

        strategy = RegionalStrategy(TestKitchen())
        assert strategy.region == "Test"
        assert isinstance(strategy.create_product("cheese"), NotFound)


class TestFamilyStrategy:
    """Tests for FamilyStrategy (abstract factory)."""

    def test_unset_raises_no_catalog(self):
        """Ordering before set_family fails fast."""
        strategy = FamilyStrategy()
        assert not strategy.is_configured
        assert strategy.region is None
        with pytest.raises(NoCatalogConfigured) as exc_info:
            strategy.create_product("cheese")
        assert exc_info.value.token == "cheese"

    def test_set_family(self):
        """set_family activates a catalog."""
        strategy = FamilyStrategy()
        strategy.set_family(BEIJING_CATALOG)
        assert strategy.is_configured
        assert strategy.create_product("cheese").label == "cheese/Beijing"

    def test_swap_family_at_runtime(self):
        """Swapping the catalog changes the family, nothing else."""
        strategy = FamilyStrategy(BEIJING_CATALOG)
        assert strategy.create_product("pepper").region == "Beijing"
        strategy.set_family(LONDON_CATALOG)
        assert strategy.region == "London"
        assert strategy.create_product("pepper").region == "London"

    def test_set_family_rejects_none(self):
        """None is not a catalog."""
        strategy = FamilyStrategy()
        with pytest.raises(TypeError):
            strategy.set_family(None)
        assert not strategy.is_configured

    def test_set_family_rejects_non_catalog(self):
        """Objects without create/region are rejected."""
        with pytest.raises(TypeError):
            FamilyStrategy("Beijing")


class TestStrategyEquivalence:
    """All strategies give the same pizza for the same region and token."""

    @pytest.mark.parametrize("token", ["cheese", "pepper"])
    def test_beijing_equivalence(self, beijing_strategies, token):
        """Same label and final stage across strategies in Beijing."""
        pipeline = OrderPipeline()
        outcomes = {
            (r.outcome.label, r.outcome.final_stage)
            for r in (pipeline.process(s, token) for s in beijing_strategies)
        }
        assert outcomes == {(f"{token}/Beijing", Stage.BOXED)}

    @pytest.mark.parametrize("token", ["cheese", "pepper"])
    def test_london_equivalence(self, london_strategies, token):
        """Same pizza fields across strategies in London."""
        pizzas = [s.create_product(token) for s in london_strategies]
        assert len({p.label for p in pizzas}) == 1
        assert len({p.recipe for p in pizzas}) == 1

    def test_unknown_token_equivalence(self, beijing_strategies):
        """Every strategy reports NotFound for the same unknown token."""
        for strategy in beijing_strategies:
            assert isinstance(strategy.create_product("bogus"), NotFound)


class TestBuildStrategy:
    """Tests for build_strategy."""

    @pytest.mark.parametrize(
        "kind,cls",
        [("direct", DirectStrategy), ("regional", RegionalStrategy), ("family", FamilyStrategy)],
    )
    def test_builds_each_kind(self, kind, cls):
        """Each kind name maps to its strategy."""
        strategy = build_strategy(kind, "London")
        assert isinstance(strategy, cls)
        assert strategy.region == "London"

    def test_unknown_kind(self):
        """Unknown kinds raise ValueError."""
        with pytest.raises(ValueError):
            build_strategy("magic", "Beijing")

    def test_unknown_region(self):
        """Unknown regions raise KeyError."""
        with pytest.raises(KeyError):
            build_strategy("family", "Paris")

    def test_regional_needs_kitchen(self):
        """The house menu has no regional kitchen."""
        with pytest.raises(KeyError):
            build_strategy("regional", HOUSE)

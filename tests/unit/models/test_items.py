"""Item records: category variants flattened next to the common fields."""

import pytest
from pydantic import TypeAdapter, ValidationError

from wynn_api.models import (
    AccessoryInfo,
    AccessoryType,
    ArmourInfo,
    ArmourType,
    AttackSpeed,
    CharmInfo,
    DropType,
    DynamicStat,
    IngredientInfo,
    IngredientTier,
    Item,
    ItemQuery,
    ItemRarity,
    MaterialInfo,
    OtherCraftedItemType,
    StaticStat,
    TomeInfo,
    TomeType,
    ToolInfo,
    WeaponInfo,
    WeaponType,
)
from wynn_api.models.item import ItemResult
from wynn_api.models.player import AttributeIcon, LegacyIcon, SkinIcon

pytestmark = pytest.mark.unit

ITEMS = TypeAdapter(dict[str, Item])


@pytest.fixture
def items(load_fixture):
    return ITEMS.validate_python(load_fixture("item_database.json"))


class TestItemVariants:
    def test_every_category_resolves(self, items):
        categories = {name: item.category for name, item in items.items()}
        assert categories == {
            "Warp": "weapon",
            "Accursed Effigy": "ingredient",
            "Sapphire Shard": "material",
            "Ornate Shadow Cowl": "armour",
            "Gathering Axe T1": "tool",
            "Cleansing Tome": "tome",
            "Charm of the Worm": "charm",
            "Diamond Hydro Ring": "accessory",
        }

    def test_weapon(self, items):
        warp = items["Warp"]
        assert isinstance(warp.info, WeaponInfo)
        assert isinstance(warp.icon, AttributeIcon)
        assert warp.info.weapon_type is WeaponType.WAND
        assert warp.info.attack_speed is AttackSpeed.SUPER_FAST
        assert warp.info.identifications["rawAgility"] == StaticStat(15)
        assert warp.info.identifications["walkSpeed"] == DynamicStat(
            min=63, raw=180, max=234
        )
        assert warp.info.requirements.class_requirement.value == "mage"
        assert warp.required_level() == 91

    def test_ingredient(self, items):
        effigy = items["Accursed Effigy"].info
        assert isinstance(effigy, IngredientInfo)
        assert effigy.tier is IngredientTier.TWO_STARS
        assert effigy.consumable_only_ids.duration == -60
        assert effigy.item_only_ids.durability_modifier == -91000
        assert effigy.item_only_ids.agility_requirement == 0
        assert effigy.dropped_by[0].location == (1, 2, 3, 4)
        assert effigy.dropped_by[1].location is None
        assert isinstance(items["Accursed Effigy"].icon, SkinIcon)

    def test_material_craftable_uses_legacy_spellings(self, items):
        shard = items["Sapphire Shard"]
        assert isinstance(shard.info, MaterialInfo)
        assert isinstance(shard.icon, LegacyIcon)
        assert shard.info.craftable == {
            ArmourType.HELMET,
            AccessoryType.RING,
            OtherCraftedItemType.POTION,
            WeaponType.SPEAR,
        }
        assert shard.info.tier is IngredientTier.ONE_STAR

    def test_armour_defaults(self, items):
        cowl = items["Ornate Shadow Cowl"]
        assert isinstance(cowl.info, ArmourInfo)
        assert cowl.icon is None
        assert cowl.info.powder_slots == 0
        assert cowl.info.major_ids == {}
        assert cowl.info.drop_meta.drop_type is DropType.DUNGEON_MERCHANT

    def test_tome_event_drop(self, items):
        tome = items["Cleansing Tome"].info
        assert isinstance(tome, TomeInfo)
        assert tome.tome_type is TomeType.WEAPON_TOME
        assert tome.drop_meta.drop_type is DropType.EVENT_MERCHANT
        assert tome.drop_meta.event == "halloween"

    def test_other_categories(self, items):
        assert isinstance(items["Gathering Axe T1"].info, ToolInfo)
        charm = items["Charm of the Worm"].info
        assert isinstance(charm, CharmInfo)
        assert charm.requirements.level_range.max == 105
        ring = items["Diamond Hydro Ring"].info
        assert isinstance(ring, AccessoryInfo)
        assert ring.accessory_type is AccessoryType.RING
        assert ring.rarity is ItemRarity.UNIQUE

    def test_unknown_category_fails(self):
        with pytest.raises(ValidationError, match="unrecognized 'type' tag"):
            Item.model_validate({"internalName": "X", "type": "pet"})

    def test_missing_category_fails(self):
        with pytest.raises(ValidationError, match="missing discriminator"):
            Item.model_validate({"internalName": "X"})

    def test_round_trip(self, items):
        wire = ITEMS.dump_python(items, mode="json", by_alias=True)
        assert ITEMS.validate_python(wire) == items

    def test_serializes_flat_with_tag(self, items):
        wire = items["Gathering Axe T1"].to_wire()
        assert wire["type"] == "tool"
        assert wire["toolType"] == "axe"
        assert wire["internalName"] == "Gathering Axe T1"
        assert "info" not in wire


class TestItemResult:
    def test_paged_listing(self, load_fixture):
        result = ItemResult.model_validate(
            {
                "controller": {
                    "count": 8,
                    "pages": 1,
                    "previous": None,
                    "current": 1,
                    "next": None,
                    "links": {"previous": None, "next": None},
                },
                "results": load_fixture("item_database.json"),
            }
        )
        assert result.controller.current == 1
        assert len(result.results) == 8


class TestItemQuery:
    def test_defaults(self):
        query = ItemQuery()
        assert query.level_range == (0, 110)
        assert query.query is None

    def test_wire_shape(self):
        query = ItemQuery.with_query("warp")
        assert query.add_item_type(WeaponType.WAND)
        assert not query.add_item_type(WeaponType.WAND)
        query.add_tier(ItemRarity.LEGENDARY)
        query.add_tier(IngredientTier.THREE_STARS)
        query.set_level_range(80, 100)

        wire = query.to_wire()
        assert wire["query"] == "warp"
        assert wire["type"] == ["wand"]
        assert sorted(wire["tier"], key=str) == [3, "legendary"]
        assert wire["levelRange"] == [80, 100]
        assert wire["attackSpeed"] == []
        assert wire["majorIds"] == []

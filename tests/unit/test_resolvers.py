"""
Unit tests for the concrete resolvers and ResolverContext helpers.

All packages and models live in an in-memory container (see conftest.py);
model paths in assertions carry the default "/win32" model root.
"""

import logging

import pytest

from set_resolver.assets.models import PackageCategory, PackageFile
from set_resolver.resolver import (
    AqaMagnetResolver,
    ChaosEmeraldResolver,
    EnemyResolver,
    GizmoResolver,
    GuillotineResolver,
    ItemboxResolver,
    ObjectResolver,
    PackageResolver,
    ResolveResult,
    ResolverContext,
    RevolvingNetResolver,
    VehicleResolver,
)
from set_resolver.transform import Vector3

GUILLOTINE_MODELS = {
    "modelA": "object/cmn/guillotine/guillotineA.xno",
    "modelB": "object/cmn/guillotine/guillotineB.xno",
    "modelC": "object/cmn/guillotine/guillotineC.xno",
}

NET_BODY = "object/wvo/revolvingnet/body.xno"
NET_NET = "object/wvo/revolvingnet/net.xno"


# ── ResolveResult ─────────────────────────────────────────────────────────────

class TestResolveResult:
    def test_empty_is_not_terminal(self):
        assert ResolveResult.empty().is_empty
        assert not ResolveResult.empty().is_terminal

    def test_skip_and_failure_are_terminal(self):
        assert ResolveResult.skipped().is_terminal
        assert ResolveResult.failed("x").is_terminal

    def test_failure_keeps_message(self):
        result = ResolveResult.failed("Package not found for ring")
        assert result.is_failed
        assert result.message == "Package not found for ring"
        assert "Package not found" in str(result)


# ── ResolverContext ───────────────────────────────────────────────────────────

class TestResolverContext:
    @pytest.fixture
    def category(self) -> PackageCategory:
        return PackageCategory("model", (
            PackageFile("modelA", "a.xno"),
            PackageFile("modelB", ""),
        ))

    def test_variant_one_picks_first_name(self, category):
        assert ResolverContext.get_variant_model(category, 1, "modelA", "modelB") == "a.xno"

    def test_variant_zero_is_none(self, category):
        assert ResolverContext.get_variant_model(category, 0, "modelA", "modelB") is None

    def test_variant_past_end_is_none(self, category):
        assert ResolverContext.get_variant_model(category, 3, "modelA", "modelB") is None

    def test_empty_location_is_none(self, category):
        assert ResolverContext.get_variant_model(category, 2, "modelA", "modelB") is None

    def test_missing_file_is_none(self, category):
        assert ResolverContext.get_variant_model(category, 1, "modelZ") is None

    def test_find_package_for_unknown_type(self, context):
        assert context.find_package_for_type("mystery") is None

    def test_find_package_for_type(self, context, add_package):
        add_package("ring", {"model": {"model": "object/cmn/ring.xno"}})
        package = context.find_package_for_type("ring")
        assert package.category("model").file("model").location == "object/cmn/ring.xno"

    def test_find_node_offset(self, context, add_model):
        add_model("/win32/" + NET_BODY, {"root": (0, 0, 0), "netpoint": (0, 5, 0)})
        assert context.find_node_offset("/win32/" + NET_BODY, "netpoint") == Vector3(0, 5, 0)
        assert context.find_node_offset("/win32/" + NET_BODY, "absent") is None
        assert context.find_node_offset("/win32/missing.xno", "netpoint") is None

    def test_clear_caches(self, context, add_package):
        add_package("ring", {"model": {"model": "object/cmn/ring.xno"}})
        context.find_package_for_type("ring")
        assert len(context.cache) == 1
        context.clear_caches()
        assert len(context.cache) == 0


# ── Variant resolvers ─────────────────────────────────────────────────────────

class TestGuillotineResolver:
    @pytest.fixture
    def resolver(self) -> GuillotineResolver:
        return GuillotineResolver()

    def test_claims_only_guillotine(self, resolver):
        assert resolver.can_resolve("common_guillotine")
        assert not resolver.can_resolve("ring")

    def test_variant_two_picks_model_b(self, resolver, context, add_package, place):
        add_package("common_guillotine", {"model": GUILLOTINE_MODELS})
        result = resolver.resolve(context, place("common_guillotine", 2, position=(1, 2, 3)))

        assert result.is_success
        (instance,) = result.instances
        assert instance.model_path == "/win32/object/cmn/guillotine/guillotineB.xno"
        assert instance.position == Vector3(1, 2, 3)

    def test_variant_zero_fails(self, resolver, context, add_package, place):
        add_package("common_guillotine", {"model": GUILLOTINE_MODELS})
        result = resolver.resolve(context, place("common_guillotine", 0))
        assert result.is_failed
        assert "variant 0" in result.message

    def test_missing_variant_parameter_fails(self, resolver, context, add_package, place):
        add_package("common_guillotine", {"model": GUILLOTINE_MODELS})
        assert resolver.resolve(context, place("common_guillotine")).is_failed

    def test_out_of_range_variant_fails(self, resolver, context, add_package, place):
        add_package("common_guillotine", {"model": GUILLOTINE_MODELS})
        result = resolver.resolve(context, place("common_guillotine", 4))
        assert result.is_failed
        assert result.message == "Could not find requested guillotine model for variant 4"

    def test_string_variant_fails(self, resolver, context, add_package, place):
        add_package("common_guillotine", {"model": GUILLOTINE_MODELS})
        result = resolver.resolve(context, place("common_guillotine", "B"))
        assert result.is_failed
        assert result.message.startswith("Invalid guillotine variant")

    def test_missing_package_fails(self, resolver, context, place):
        result = resolver.resolve(context, place("common_guillotine", 1))
        assert result.message == "Package not found for common_guillotine"

    def test_missing_model_category_fails(self, resolver, context, add_package, place):
        add_package("common_guillotine", {"motion": {"idle": "a.xnm"}})
        result = resolver.resolve(context, place("common_guillotine", 1))
        assert result.message == "Could not find model category in guillotine package"


class TestOtherVariantResolvers:
    def test_itembox_claims_all_itembox_types(self):
        resolver = ItemboxResolver()
        assert all(resolver.can_resolve(t) for t in ("itemboxg", "itemboxa", "itembox_next"))

    def test_itembox_variant_five_is_speedup(self, context, add_package, place):
        add_package("itemboxg", {"model": {
            name: f"object/cmn/itembox/{name}.xno" for name in ItemboxResolver.candidates
        }})
        result = ItemboxResolver().resolve(context, place("itemboxg", 5))
        assert result.instances[0].model_path == "/win32/object/cmn/itembox/model_speedup.xno"

    def test_chaos_emerald_variant_seven_is_red(self, context, add_package, place):
        add_package("common_chaosemerald", {"model": {"model_r": "object/cmn/emerald_r.xno"}})
        result = ChaosEmeraldResolver().resolve(context, place("common_chaosemerald", 7))
        assert result.instances[0].model_path == "/win32/object/cmn/emerald_r.xno"

    def test_magnet_missing_candidate_file_fails(self, context, add_package, place):
        add_package("aqa_magnet", {"model": {"bofmodel": "object/aqa/bof.xno"}})
        result = AqaMagnetResolver().resolve(context, place("aqa_magnet", 2))
        assert result.is_failed
        assert "magnet" in result.message


# ── Composite resolver ────────────────────────────────────────────────────────

class TestRevolvingNetResolver:
    @pytest.fixture
    def resolver(self) -> RevolvingNetResolver:
        return RevolvingNetResolver()

    @pytest.fixture
    def net_package(self, add_package):
        return add_package("wvo_revolvingnet", {"model": {"body": NET_BODY, "net": NET_NET}})

    def test_net_hangs_from_netpoint(self, resolver, context, net_package, add_model, place):
        add_model("/win32/" + NET_BODY, {"netpoint": (0, 5, 0)})
        result = resolver.resolve(context, place("wvo_revolvingnet", position=(10, 0, 0)))

        body, net = result.instances
        assert body.model_path == "/win32/" + NET_BODY
        assert body.position == Vector3(10, 0, 0)
        assert net.model_path == "/win32/" + NET_NET
        assert net.position == Vector3(10, 5, 0)

    def test_both_instances_share_rotation(self, resolver, context, net_package, add_model, place):
        add_model("/win32/" + NET_BODY, {"netpoint": (0, 5, 0)})
        rotation = (0.0, 0.7071, 0.0, 0.7071)
        result = resolver.resolve(context, place("wvo_revolvingnet", rotation=rotation))
        assert all(tuple(i.rotation) == rotation for i in result.instances)

    def test_undecodable_body_uses_zero_offset(self, resolver, context, container,
                                               net_package, place, caplog):
        container.add("/win32/" + NET_BODY, b"\x00garbage")
        with caplog.at_level(logging.WARNING):
            result = resolver.resolve(context, place("wvo_revolvingnet", position=(10, 0, 0)))

        assert result.is_success
        assert [i.position for i in result.instances] == [Vector3(10, 0, 0), Vector3(10, 0, 0)]
        assert "Could not decode" in caplog.text

    def test_missing_node_uses_zero_offset(self, resolver, context, net_package, add_model, place):
        add_model("/win32/" + NET_BODY, {"root": (1, 1, 1)})
        result = resolver.resolve(context, place("wvo_revolvingnet", position=(3, 0, 0)))
        assert result.instances[1].position == Vector3(3, 0, 0)

    def test_missing_net_file_draws_body_only(self, resolver, context, add_package, place):
        add_package("wvo_revolvingnet", {"model": {"body": NET_BODY}})
        result = resolver.resolve(context, place("wvo_revolvingnet"))
        assert [i.model_path for i in result.instances] == ["/win32/" + NET_BODY]

    def test_missing_body_file_fails(self, resolver, context, add_package, place):
        add_package("wvo_revolvingnet", {"model": {"net": NET_NET}})
        assert resolver.resolve(context, place("wvo_revolvingnet")).is_failed

    def test_missing_package_fails(self, resolver, context, place):
        result = resolver.resolve(context, place("wvo_revolvingnet"))
        assert result.message == "Package not found for wvo_revolvingnet"

    def test_body_decoded_once_across_placements(self, resolver, context, net_package,
                                                 add_model, place):
        add_model("/win32/" + NET_BODY, {"netpoint": (0, 5, 0)})
        resolver.resolve(context, place("wvo_revolvingnet"))
        resolver.resolve(context, place("wvo_revolvingnet"))
        # one package + one model decoded
        assert context.cache.stats.decodes == 2


# ── Gizmo / object / package resolvers ───────────────────────────────────────

class TestGizmoResolver:
    def test_skips_non_visual_types(self, context, place):
        resolver = GizmoResolver()
        assert resolver.can_resolve("eventbox")
        assert resolver.resolve(context, place("eventbox")).is_skipped

    def test_does_not_claim_visual_types(self):
        assert not GizmoResolver().can_resolve("ring")


class TestObjectResolver:
    @pytest.fixture
    def resolver(self) -> ObjectResolver:
        return ObjectResolver()

    def test_physics_model_used_unchanged(self, resolver, context, place):
        result = resolver.resolve(context, place("objectphysics", 0, "Rock01", 1.0))
        (instance,) = result.instances
        assert instance.model_path == "object/common/rock01.xno"

    def test_path_object_uses_path_table(self, resolver, context, place):
        result = resolver.resolve(context, place("common_path_obj", "rail01", "Cart"))
        assert result.instances[0].model_path == "object/rct/cart.xno"

    def test_unknown_physics_name_fails(self, resolver, context, place):
        result = resolver.resolve(context, place("objectphysics", 0, "Boulder", 1.0))
        assert result.message == "Unable to find physics parameter 'Boulder'"

    def test_unknown_path_name_fails(self, resolver, context, place):
        result = resolver.resolve(context, place("common_path_obj", "rail01", "Boulder"))
        assert result.message == "Unable to find path parameter 'Boulder'"

    def test_actor_without_object_name_is_empty(self, resolver, context, place):
        assert resolver.resolve(context, place("physicspath", 1.0, 0)).is_empty

    def test_missing_actor_is_empty(self, resolver, container, place):
        bare = ResolverContext.create(container)
        assert bare.tables.actors == ()
        assert resolver.resolve(bare, place("objectphysics", 0, "Rock01")).is_empty

    def test_missing_parameter_at_index_is_empty(self, resolver, context, place):
        assert resolver.resolve(context, place("objectphysics", 0)).is_empty

    def test_non_string_object_name_fails(self, resolver, context, place):
        assert resolver.resolve(context, place("objectphysics", 0, 7)).is_failed


class TestPackageResolver:
    @pytest.fixture
    def resolver(self) -> PackageResolver:
        return PackageResolver()

    def test_claims_everything(self, resolver):
        assert resolver.can_resolve("anything")
        assert resolver.priority == -20

    def test_model_file_in_model_category(self, resolver, context, add_package, place):
        add_package("ring", {"model": {"model": "object/cmn/ring.xno"}})
        result = resolver.resolve(context, place("ring", position=(0, 1, 0)))
        (instance,) = result.instances
        assert instance.model_path == "/win32/object/cmn/ring.xno"
        assert instance.position == Vector3(0, 1, 0)

    def test_unknown_type_fails(self, resolver, context, place):
        result = resolver.resolve(context, place("mystery"))
        assert result.message == "Package not found for mystery"

    def test_no_model_category_is_empty(self, resolver, context, add_package, place):
        add_package("spring", {"effect": {"model": "fx.xnf"}})
        assert resolver.resolve(context, place("spring")).is_empty

    def test_no_model_file_is_empty(self, resolver, context, add_package, place):
        add_package("spring", {"model": {"other": "spring.xno"}})
        assert resolver.resolve(context, place("spring")).is_empty

    def test_empty_model_location_is_empty(self, resolver, context, add_package, place):
        add_package("spring", {"model": {"model": ""}})
        assert resolver.resolve(context, place("spring")).is_empty


# ── Vehicle / enemy resolvers ─────────────────────────────────────────────────

class TestVehicleResolver:
    @pytest.mark.parametrize("variant, gadget", [(1, "Jeep"), (2, "Bike"), (3, "Hover"), (4, "Glider")])
    def test_variants(self, context, place, variant, gadget):
        result = VehicleResolver().resolve(context, place("vehicle", variant))
        assert result.instances[0].model_path == f"/win32/object/Common/vehicle/Gadget_{gadget}.xno"

    def test_unknown_variant_fails(self, context, place):
        result = VehicleResolver().resolve(context, place("vehicle", 5))
        assert result.message == "Unknown vehicle variant 5"


class TestEnemyResolver:
    @pytest.fixture
    def resolver(self) -> EnemyResolver:
        return EnemyResolver()

    def test_plain_enemy(self, resolver, context, place):
        (instance,) = resolver.resolve(context, place("enemy", "eGunner")).instances
        assert instance.model_path == "/win32/enemy/eGunner/en_eGunner.xno"
        assert instance.archive_hint == "xenon/archives/enemy"

    def test_folder_alias_and_fly_suffix(self, resolver, context, place):
        (instance,) = resolver.resolve(context, place("enemyextra", "eStinger(Fly)")).instances
        assert instance.model_path == "/win32/enemy/eGunner/en_eStinger.xno"

    def test_boss_uses_boss_archive_and_file_alias(self, resolver, context, place):
        (instance,) = resolver.resolve(context, place("enemy", "secondiblis")).instances
        assert instance.model_path == "/win32/enemy/iblis02/en_Iblis02.xno"
        assert instance.archive_hint == "win32/archives/enemy_data"

    def test_missing_name_fails(self, resolver, context, place):
        assert resolver.resolve(context, place("enemy")).is_failed

    def test_numeric_name_fails(self, resolver, context, place):
        assert resolver.resolve(context, place("enemy", 3)).is_failed

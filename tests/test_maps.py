import dataclasses

import pytest

from portal2boards.maps import (
    APERTURE_TAG,
    PORTAL2,
    PORTAL_STORIES,
    Map,
    MapType,
    get_map_by_name,
)


def test_lookup_known_portal2_map():
    found = get_map_by_name("sp_a1_intro3")
    assert found == Map("sp_a1_intro3", "Portal Gun", MapType.SINGLE_PLAYER, 47458, 47459, 7)


def test_lookup_coop_map():
    found = get_map_by_name("mp_coop_paint_crazy_box", PORTAL2)
    assert found.chamber_name == "Crazier Box"
    assert found.type is MapType.COOPERATIVE
    assert found.best_time_id == 48287
    assert found.best_portals_id == 48288


def test_extras_map():
    found = get_map_by_name("e1912")
    assert found.type is MapType.EXTRAS
    assert found.chamber_name == "Super 8"
    assert not found.has_leaderboard()


def test_unknown_name_returns_none():
    assert get_map_by_name("not_a_map") is None
    assert get_map_by_name("sp_a1_intro3", APERTURE_TAG) is None


def test_lookup_is_case_sensitive():
    assert get_map_by_name("SP_A1_INTRO3") is None


def test_default_campaign_is_portal2():
    assert get_map_by_name("sp_a5_credits") == get_map_by_name("sp_a5_credits", PORTAL2)
    assert get_map_by_name("sp_a5_credits").chamber_name == "Credits"


def test_campaign_selects_among_duplicate_names():
    assert get_map_by_name("sp_a5_credits", PORTAL_STORIES).chamber_name == "credits"


def test_aperture_tag_lookup():
    found = get_map_by_name("gg_stage_theend", APERTURE_TAG)
    assert found.chamber_name == "stage_theend"
    assert found.chapter_id == -1


def test_has_leaderboard_with_time_board_only():
    found = get_map_by_name("sp_a1_intro1")
    assert found.best_portals_id == 0
    assert found.has_leaderboard()


def test_has_leaderboard_false_without_time_board():
    assert not get_map_by_name("sp_a2_bts6").has_leaderboard()
    assert not get_map_by_name("mp_coop_start").has_leaderboard()


@pytest.mark.parametrize("campaign", [PORTAL2, APERTURE_TAG, PORTAL_STORIES])
def test_every_map_found_by_its_own_name(campaign):
    for item in campaign:
        assert get_map_by_name(item.level_name, campaign) is item


@pytest.mark.parametrize("campaign", [PORTAL2, APERTURE_TAG, PORTAL_STORIES])
def test_level_names_unique(campaign):
    names = [item.level_name for item in campaign]
    assert len(names) == len(set(names))


@pytest.mark.parametrize("campaign", [PORTAL2, APERTURE_TAG, PORTAL_STORIES])
def test_has_leaderboard_matches_time_id(campaign):
    for item in campaign:
        assert item.has_leaderboard() == (item.best_time_id != 0)


@pytest.mark.parametrize("campaign", [APERTURE_TAG, PORTAL_STORIES])
def test_mod_campaigns_have_no_boards(campaign):
    assert all(item.type is MapType.SINGLE_PLAYER for item in campaign)
    assert not any(item.has_leaderboard() for item in campaign)


def test_map_is_immutable():
    found = get_map_by_name("sp_a1_intro3")
    with pytest.raises(dataclasses.FrozenInstanceError):
        found.best_time_id = 1
    assert found.best_time_id == 47458
    assert get_map_by_name("sp_a1_intro3").best_time_id == 47458


def test_lookup_in_custom_campaign():
    custom = [Map("my_map", "Mine", MapType.CUSTOM, 5, 6, 2)]
    assert get_map_by_name("my_map", custom).type is MapType.CUSTOM
    assert get_map_by_name("sp_a1_intro3", custom) is None
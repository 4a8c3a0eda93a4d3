"""Known maps of Portal 2 and its mods, with their leaderboard identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

__all__ = [
    "MapType",
    "Map",
    "PORTAL2",
    "APERTURE_TAG",
    "PORTAL_STORIES",
    "get_map_by_name",
]


class MapType(Enum):
    """Kind of map a level belongs to."""

    UNKNOWN = 0
    SINGLE_PLAYER = 1
    COOPERATIVE = 2
    EXTRAS = 3
    WORKSHOP_SINGLE_PLAYER = 4
    WORKSHOP_COOPERATIVE = 5
    CUSTOM = 6


@dataclass(frozen=True)
class Map:
    """A single level and its board identifiers."""

    level_name: str
    chamber_name: str
    type: MapType
    best_time_id: int
    best_portals_id: int
    chapter_id: int

    def has_leaderboard(self) -> bool:
        """Return whether the map has a time leaderboard on the boards."""
        return self.best_time_id != 0


_SP = MapType.SINGLE_PLAYER
_MP = MapType.COOPERATIVE


def _unranked(level_name: str, chamber_name: str) -> Map:
    return Map(level_name, chamber_name, _SP, 0, 0, -1)


PORTAL2: tuple[Map, ...] = (
    Map("sp_a1_intro1", "Container Ride", _SP, 62761, 0, 7),
    Map("sp_a1_intro2", "Portal Carousel", _SP, 62758, 0, 7),
    Map("sp_a1_intro3", "Portal Gun", _SP, 47458, 47459, 7),
    Map("sp_a1_intro4", "Smooth Jazz", _SP, 47455, 47454, 7),
    Map("sp_a1_intro5", "Cube Momentum", _SP, 47452, 47451, 7),
    Map("sp_a1_intro6", "Future Starter", _SP, 47106, 47107, 7),
    Map("sp_a1_intro7", "Secret Panel", _SP, 62763, 0, 7),
    Map("sp_a1_wakeup", "Wakeup", _SP, 62759, 0, 7),
    Map("sp_a2_intro", "Incinerator", _SP, 47735, 47734, 7),
    Map("sp_a2_laser_intro", "Laser Intro", _SP, 62765, 0, 8),
    Map("sp_a2_laser_stairs", "Laser Stairs", _SP, 47736, 47737, 8),
    Map("sp_a2_dual_lasers", "Dual Lasers", _SP, 47738, 47739, 8),
    Map("sp_a2_laser_over_goo", "Laser Over Goo", _SP, 47742, 47743, 8),
    Map("sp_a2_catapult_intro", "Catapult Intro", _SP, 62767, 0, 8),
    Map("sp_a2_trust_fling", "Trust Fling", _SP, 47744, 47745, 8),
    Map("sp_a2_pit_flings", "Pit Flings", _SP, 47465, 47466, 8),
    Map("sp_a2_fizzler_intro", "Fizzler Intro", _SP, 47746, 47747, 8),
    Map("sp_a2_sphere_peek", "Ceiling Catapult", _SP, 47748, 47749, 9),
    Map("sp_a2_ricochet", "Ricochet", _SP, 47751, 47750, 9),
    Map("sp_a2_bridge_intro", "Bridge Intro", _SP, 47752, 47753, 9),
    Map("sp_a2_bridge_the_gap", "Bridge the Gap", _SP, 47755, 47754, 9),
    Map("sp_a2_turret_intro", "Turret Intro", _SP, 47756, 47757, 9),
    Map("sp_a2_laser_relays", "Laser Relays", _SP, 47759, 47758, 9),
    Map("sp_a2_turret_blocker", "Turret Blocker", _SP, 47760, 47761, 9),
    Map("sp_a2_laser_vs_turret", "Laser vs Turret", _SP, 47763, 47762, 9),
    Map("sp_a2_pull_the_rug", "Pull the Rug", _SP, 47764, 47765, 9),
    Map("sp_a2_column_blocker", "Column Blocker", _SP, 47766, 47767, 10),
    Map("sp_a2_laser_chaining", "Laser Chaining", _SP, 47768, 47769, 10),
    Map("sp_a2_triple_laser", "Triple Laser", _SP, 47770, 47771, 10),
    Map("sp_a2_bts1", "Jail Break", _SP, 47773, 47772, 10),
    Map("sp_a2_bts2", "Escape", _SP, 47774, 47775, 10),
    Map("sp_a2_bts3", "Turret Factory", _SP, 47776, 47777, 11),
    Map("sp_a2_bts4", "Turret Sabotage", _SP, 47779, 47778, 11),
    Map("sp_a2_bts5", "Neurotoxin Sabotage", _SP, 47780, 47781, 11),
    Map("sp_a2_bts6", "Tube Ride", _SP, 0, 0, 11),
    Map("sp_a2_core", "Core", _SP, 62771, 0, 11),
    Map("sp_a3_00", "Long Fall", _SP, 0, 0, 12),
    Map("sp_a3_01", "Underground", _SP, 47783, 47782, 12),
    Map("sp_a3_03", "Cave Johnson", _SP, 47784, 47785, 12),
    Map("sp_a3_jump_intro", "Repulsion Intro", _SP, 47787, 47786, 12),
    Map("sp_a3_bomb_flings", "Bomb Flings", _SP, 47468, 47467, 12),
    Map("sp_a3_crazy_box", "Crazy Box", _SP, 47469, 47470, 12),
    Map("sp_a3_transition01", "PotatOS", _SP, 47472, 47471, 12),
    Map("sp_a3_speed_ramp", "Propulsion Intro", _SP, 47791, 47792, 13),
    Map("sp_a3_speed_flings", "Propulsion Flings", _SP, 47793, 47794, 13),
    Map("sp_a3_portal_intro", "Conversion Intro", _SP, 47795, 47796, 13),
    Map("sp_a3_end", "Three Gels", _SP, 47798, 47799, 13),
    Map("sp_a4_intro", "Test", _SP, 88350, 0, 14),
    Map("sp_a4_tb_intro", "Funnel Intro", _SP, 47800, 47801, 14),
    Map("sp_a4_tb_trust_drop", "Ceiling Button", _SP, 47802, 47803, 14),
    Map("sp_a4_tb_wall_button", "Wall Button", _SP, 47804, 47805, 14),
    Map("sp_a4_tb_polarity", "Polarity", _SP, 47806, 47807, 14),
    Map("sp_a4_tb_catch", "Funnel Catch", _SP, 47808, 47809, 14),
    Map("sp_a4_stop_the_box", "Stop the Box", _SP, 47811, 47812, 14),
    Map("sp_a4_laser_catapult", "Laser Catapult", _SP, 47813, 47814, 14),
    Map("sp_a4_laser_platform", "Laser Platform", _SP, 47815, 47816, 14),
    Map("sp_a4_speed_tb_catch", "Propulsion Catch", _SP, 47817, 47818, 14),
    Map("sp_a4_jump_polarity", "Repulsion Polarity", _SP, 47819, 47820, 14),
    Map("sp_a4_finale1", "Finale 1", _SP, 62776, 0, 15),
    Map("sp_a4_finale2", "Finale 2", _SP, 47821, 47822, 15),
    Map("sp_a4_finale3", "Finale 3", _SP, 47824, 47823, 15),
    Map("sp_a4_finale4", "Finale 4", _SP, 47456, 47457, 15),
    Map("sp_a5_credits", "Credits", _SP, 0, 0, -1),
    Map("mp_coop_credits", "Credits", _MP, 0, 0, -1),
    Map("mp_coop_start", "Calibration Course", _MP, 0, 0, 0),
    Map("mp_coop_lobby_2", "Hub", _MP, 0, 0, 0),
    Map("mp_coop_doors", "Doors", _MP, 47741, 47740, 1),
    Map("mp_coop_race_2", "Buttons", _MP, 47825, 47826, 1),
    Map("mp_coop_laser_2", "Lasers", _MP, 47828, 47827, 1),
    Map("mp_coop_rat_maze", "Rat Maze", _MP, 47829, 47830, 1),
    Map("mp_coop_laser_crusher", "Laser Crusher", _MP, 45467, 45466, 1),
    Map("mp_coop_teambts", "Behind The Scenes", _MP, 46362, 46361, 1),
    Map("mp_coop_fling_3", "Flings", _MP, 47831, 47832, 2),
    Map("mp_coop_infinifling_train", "Infinifling", _MP, 47833, 47834, 2),
    Map("mp_coop_come_along", "Team Retrieval", _MP, 47835, 47836, 2),
    Map("mp_coop_fling_1", "Vertical Flings", _MP, 47837, 47838, 2),
    Map("mp_coop_catapult_1", "Catapults", _MP, 47840, 47839, 2),
    Map("mp_coop_multifling_1", "Multifling", _MP, 47841, 47842, 2),
    Map("mp_coop_fling_crushers", "Fling Crushers", _MP, 47844, 47843, 2),
    Map("mp_coop_fan", "Industrial Fan", _MP, 47845, 47846, 2),
    Map("mp_coop_wall_intro", "Cooperative Bridges", _MP, 47848, 47847, 3),
    Map("mp_coop_wall_2", "Bridge Swap", _MP, 47849, 47850, 3),
    Map("mp_coop_catapult_wall_intro", "Fling Block", _MP, 47854, 47855, 3),
    Map("mp_coop_wall_block", "Catapult Block", _MP, 47856, 47857, 3),
    Map("mp_coop_catapult_2", "Bridge Fling", _MP, 47858, 47859, 3),
    Map("mp_coop_turret_walls", "Turret Walls", _MP, 47861, 47860, 3),
    Map("mp_coop_turret_ball", "Turret Assassin", _MP, 52642, 52641, 3),
    Map("mp_coop_wall_5", "Bridge Testing", _MP, 52660, 52659, 3),
    Map("mp_coop_tbeam_redirect", "Cooperative Funnels", _MP, 52662, 52661, 4),
    Map("mp_coop_tbeam_drill", "Funnel Drill", _MP, 52663, 52664, 4),
    Map("mp_coop_tbeam_catch_grind_1", "Funnel Catch", _MP, 52665, 52666, 4),
    Map("mp_coop_tbeam_laser_1", "Funnel Laser", _MP, 52667, 52668, 4),
    Map("mp_coop_tbeam_polarity", "Cooperative Polarity", _MP, 52671, 52672, 4),
    Map("mp_coop_tbeam_polarity2", "Funnel Hop", _MP, 52687, 52688, 4),
    Map("mp_coop_tbeam_polarity3", "Advanced Polarity", _MP, 52689, 52690, 4),
    Map("mp_coop_tbeam_maze", "Funnel Maze", _MP, 52691, 52692, 4),
    Map("mp_coop_tbeam_end", "Turret Warehouse", _MP, 52777, 52778, 4),
    Map("mp_coop_paint_come_along", "Repulsion Jumps", _MP, 52694, 52693, 5),
    Map("mp_coop_paint_redirect", "Double Bounce", _MP, 52711, 52712, 5),
    Map("mp_coop_paint_bridge", "Bridge Repulsion", _MP, 52714, 52713, 5),
    Map("mp_coop_paint_walljumps", "Wall Repulsion", _MP, 52715, 52716, 5),
    Map("mp_coop_paint_speed_fling", "Propulsion Crushers", _MP, 52717, 52718, 5),
    Map("mp_coop_paint_red_racer", "Turret Ninja", _MP, 52735, 52736, 5),
    Map("mp_coop_paint_speed_catch", "Propulsion Retrieval", _MP, 52738, 52737, 5),
    Map("mp_coop_paint_longjump_intro", "Vault Entrance", _MP, 52740, 52739, 5),
    Map("mp_coop_separation_1", "Separation", _MP, 49341, 49342, 6),
    Map("mp_coop_tripleaxis", "Triple Axis", _MP, 49343, 49344, 6),
    Map("mp_coop_catapult_catch", "Catapult Catch", _MP, 49345, 49346, 6),
    Map("mp_coop_2paints_1bridge", "Bridge Gels", _MP, 49347, 49348, 6),
    Map("mp_coop_paint_conversion", "Maintenance", _MP, 49349, 49350, 6),
    Map("mp_coop_bridge_catch", "Bridge Catch", _MP, 49351, 49352, 6),
    Map("mp_coop_laser_tbeam", "Double Lift", _MP, 52757, 52758, 6),
    Map("mp_coop_paint_rat_maze", "Gel Maze", _MP, 52759, 52760, 6),
    Map("mp_coop_paint_crazy_box", "Crazier Box", _MP, 48287, 48288, 6),
    Map("e1912", "Super 8", MapType.EXTRAS, 0, 0, -1),
)

APERTURE_TAG: tuple[Map, ...] = (
    _unranked("gg_intro_wakeup", "intro_wakeup"),
    _unranked("gg_blue_only", "blue_only"),
    _unranked("gg_blue_only_2", "blue_only_2"),
    _unranked("gg_blue_only_3", "blue_only_3"),
    _unranked("gg_blue_only_2_pt2", "blue_only_2_pt2"),
    _unranked("gg_a1_intro4", "a1_intro4"),
    _unranked("gg_blue_upplatform", "blue_upplatform"),
    _unranked("gg_red_only", "red_only"),
    _unranked("gg_red_surf", "red_surf"),
    _unranked("gg_all_intro", "all_intro"),
    _unranked("gg_all_rotating_wall", "all_rotating_wall"),
    _unranked("gg_all_fizzler", "all_fizzler"),
    _unranked("gg_all_intro_2", "all_intro_2"),
    _unranked("gg_a2_column_blocker", "a2_column_blocker"),
    _unranked("gg_all_puzzle2", "all_puzzle2"),
    _unranked("gg_all2_puzzle1", "all2_puzzle1"),
    _unranked("gg_all_puzzle1", "all_puzzle1"),
    _unranked("gg_all2_escape", "all2_escape"),
    _unranked("gg_stage_reveal", "stage_reveal"),
    _unranked("gg_stage_bridgebounce_2", "stage_bridgebounce_2"),
    _unranked("gg_stage_redfirst", "stage_redfirst"),
    _unranked("gg_stage_laserrelay", "stage_laserrelay"),
    _unranked("gg_stage_beamscotty", "stage_beamscotty"),
    _unranked("gg_stage_bridgebounce", "stage_bridgebounce"),
    _unranked("gg_stage_roofbounce", "stage_roofbounce"),
    _unranked("gg_stage_pickbounce", "stage_pickbounce"),
    _unranked("gg_stage_theend", "stage_theend"),
    _unranked("gg_tag_remix", "tag_remix"),
    _unranked("gg_trailer_map", "trailer_map"),
    _unranked("gg_credit_video", "credit_video"),
)

PORTAL_STORIES: tuple[Map, ...] = (
    _unranked("st_a1_tramride", "tramride"),
    _unranked("st_a1_mel_intro", "mel_intro"),
    _unranked("st_a1_lift", "lift"),
    _unranked("st_a1_garden", "garden"),
    _unranked("st_a2_garden_de", "garden_de"),
    _unranked("st_a2_underbounce", "underbounce"),
    _unranked("st_a2_once_upon", "once_upon"),
    _unranked("st_a2_past_power", "past_power"),
    _unranked("st_a2_ramp", "ramp"),
    _unranked("st_a2_firestorm", "firestorm"),
    _unranked("st_a3_junkyard", "junkyard"),
    _unranked("st_a3_concepts", "concepts"),
    _unranked("st_a3_paint_fling", "paint_fling"),
    _unranked("st_a3_faith_plate", "faith_plate"),
    _unranked("st_a3_transition", "transition"),
    _unranked("st_a4_overgrown", "overgrown"),
    _unranked("st_a4_tb_over_goo", "tb_over_goo"),
    _unranked("st_a4_two_of_a_kind", "two_of_a_kind"),
    _unranked("st_a4_destroyed", "destroyed"),
    _unranked("st_a4_factory", "factory"),
    _unranked("st_a4_core_access", "core_access"),
    _unranked("st_a4_finale", "finale"),
    _unranked("sp_a1_tramride", "tramride"),
    _unranked("sp_a1_mel_intro", "mel_intro"),
    _unranked("sp_a1_lift", "lift"),
    _unranked("sp_a1_garden", "garden"),
    _unranked("sp_a2_garden_de", "garden_de"),
    _unranked("sp_a2_underbounce", "underbounce"),
    _unranked("sp_a2_once_upon", "once_upon"),
    _unranked("sp_a2_past_power", "past_power"),
    _unranked("sp_a2_ramp", "ramp"),
    _unranked("sp_a2_firestorm", "firestorm"),
    _unranked("sp_a3_junkyard", "junkyard"),
    _unranked("sp_a3_concepts", "concepts"),
    _unranked("sp_a3_paint_fling", "paint_fling"),
    _unranked("sp_a3_faith_plate", "faith_plate"),
    _unranked("sp_a3_transition", "transition"),
    _unranked("sp_a4_overgrown", "overgrown"),
    _unranked("sp_a4_tb_over_goo", "tb_over_goo"),
    _unranked("sp_a4_two_of_a_kind", "two_of_a_kind"),
    _unranked("sp_a4_destroyed", "destroyed"),
    _unranked("sp_a4_factory", "factory"),
    _unranked("sp_a4_core_access", "core_access"),
    _unranked("sp_a4_finale", "finale"),
    _unranked("sp_a5_credits", "credits"),
)


def get_map_by_name(level_name: str, campaign: Iterable[Map] = PORTAL2) -> Optional[Map]:
    """Return the first map of ``campaign`` with this exact level name, or None."""
    return next((item for item in campaign if item.level_name == level_name), None)
#!filepath: stattrak/config/ledger_config.py
from pydantic import BaseModel


class LedgerConfig(BaseModel):
    """
    Lore marker and statistic display names.

    Names are matched as substrings against existing lore lines, so they
    must not collide with unrelated text on the item.
    """
    marker: str = "§d"
    kills: str = "StatTrak™ Kills"
    blocks_mined: str = "StatTrak™ Blocks Mined"
    damage_taken: str = "StatTrak™ Damage Taken"

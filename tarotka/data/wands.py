# -*- coding: utf-8 -*-
"""Wands (Hole): energy, passion, action. Image keys are derived from the card id."""

WANDS = [
    {"id": "minor_wands_ace", "number": 1, "name": "Ace of Wands", "nameCzech": "Eso holí",
     "keywords": ["inspirace", "jiskra", "potenciál"],
     "meaningUpright": "Jiskra nového nápadu a chuť se do něčeho pustit.",
     "meaningReversed": "Zpoždění, ztráta nadšení nebo nápad, který nemá kam růst."},
    {"id": "minor_wands_2", "number": 2, "name": "Two of Wands", "nameCzech": "Dvojka holí",
     "keywords": ["plánování", "rozhled", "volba"],
     "meaningUpright": "Díváš se za horizont a plánuješ další krok.",
     "meaningReversed": "Strach z neznáma tě drží v bezpečí, které už je těsné."},
    {"id": "minor_wands_3", "number": 3, "name": "Three of Wands", "nameCzech": "Trojka holí",
     "keywords": ["expanze", "očekávání", "rozvoj"],
     "meaningUpright": "To, co jsi zasela, se začíná vracet; obzor se rozšiřuje.",
     "meaningReversed": "Zdržení a zklamání z toho, že věci jdou pomaleji."},
    {"id": "minor_wands_4", "number": 4, "name": "Four of Wands", "nameCzech": "Čtyřka holí",
     "keywords": ["oslava", "domov", "milník"],
     "meaningUpright": "Radost z dosaženého milníku a pocit domova.",
     "meaningReversed": "Nestabilita doma nebo oslava, která se nekoná."},
    {"id": "minor_wands_5", "number": 5, "name": "Five of Wands", "nameCzech": "Pětka holí",
     "keywords": ["soupeření", "tření", "chaos"],
     "meaningUpright": "Střet názorů a soutěživost, která může i posunout.",
     "meaningReversed": "Vyhýbání se konfliktu nebo únava z věčných šarvátek."},
    {"id": "minor_wands_6", "number": 6, "name": "Six of Wands", "nameCzech": "Šestka holí",
     "keywords": ["úspěch", "uznání", "sebevědomí"],
     "meaningUpright": "Veřejné uznání a zasloužený úspěch.",
     "meaningReversed": "Závislost na potlesku nebo strach z neúspěchu."},
    {"id": "minor_wands_7", "number": 7, "name": "Seven of Wands", "nameCzech": "Sedmička holí",
     "keywords": ["obrana", "vytrvalost", "postoj"],
     "meaningUpright": "Stojíš si za svým, i když je tlak zvenku silný.",
     "meaningReversed": "Vyčerpání z neustálé obrany nebo ústup z vlastního místa."},
    {"id": "minor_wands_8", "number": 8, "name": "Eight of Wands", "nameCzech": "Osmička holí",
     "keywords": ["rychlost", "zprávy", "pohyb"],
     "meaningUpright": "Věci se rychle dávají do pohybu a přicházejí zprávy.",
     "meaningReversed": "Zbrklost nebo zpoždění, které tě zneklidňuje."},
    {"id": "minor_wands_9", "number": 9, "name": "Nine of Wands", "nameCzech": "Devítka holí",
     "keywords": ["odolnost", "ostražitost", "hranice"],
     "meaningUpright": "Jsi unavená, ale ještě ne poražená; poslední úsek zvládneš.",
     "meaningReversed": "Paranoia nebo obrana, která už nikoho nechrání."},
    {"id": "minor_wands_10", "number": 10, "name": "Ten of Wands", "nameCzech": "Desítka holí",
     "keywords": ["břemeno", "zodpovědnost", "přetížení"],
     "meaningUpright": "Neseš toho příliš; je čas něco odložit.",
     "meaningReversed": "Učíš se delegovat a pouštět to, co není tvoje."},
    {"id": "minor_wands_page", "number": 11, "name": "Page of Wands", "nameCzech": "Páže holí",
     "keywords": ["zvědavost", "nadšení", "objevování"],
     "meaningUpright": "Nadšené objevování a chuť zkusit něco nového.",
     "meaningReversed": "Roztěkanost nebo nápady, které zůstávají nedotažené."},
    {"id": "minor_wands_knight", "number": 12, "name": "Knight of Wands", "nameCzech": "Rytíř holí",
     "keywords": ["vášeň", "dobrodružství", "impulz"],
     "meaningUpright": "Odvážný vpád do akce a spousta vášně.",
     "meaningReversed": "Netrpělivost a unáhlené kroky bez plánu."},
    {"id": "minor_wands_queen", "number": 13, "name": "Queen of Wands", "nameCzech": "Královna holí",
     "keywords": ["charisma", "sebejistota", "teplo"],
     "meaningUpright": "Sebejisté charisma a teplo, které přitahuje druhé.",
     "meaningReversed": "Žárlivost nebo sebejistota, která se zachvěla."},
    {"id": "minor_wands_king", "number": 14, "name": "King of Wands", "nameCzech": "Král holí",
     "keywords": ["vize", "vedení", "odvaha"],
     "meaningUpright": "Vize a odvaha vést ostatní za jasným cílem.",
     "meaningReversed": "Panovačnost nebo očekávání, která nikdo nesplní."},
]

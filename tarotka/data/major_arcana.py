# -*- coding: utf-8 -*-
"""Major Arcana (22 cards). Records carry no suit tag; it is added when the catalog is built."""

MAJOR_ARCANA = [
    {
        "id": "major_00_the_fool", "number": 0, "name": "The Fool", "nameCzech": "Blázen",
        "keywords": ["začátek", "spontánnost", "důvěra"],
        "meaningUpright": "Nový začátek, skok do neznáma a lehkost, se kterou jdeš dál bez záruk.",
        "meaningReversed": "Zbrklost nebo strach udělat první krok; riskuješ bez rozmyslu, nebo vůbec.",
        "imageName": "major_00",
    },
    {
        "id": "major_01_the_magician", "number": 1, "name": "The Magician", "nameCzech": "Mág",
        "keywords": ["vůle", "dovednost", "soustředění"],
        "meaningUpright": "Máš v rukou všechno, co potřebuješ; teď jde o to použít to vědomě.",
        "meaningReversed": "Rozptýlená energie, manipulace nebo talent, který zůstává nevyužitý.",
        "imageName": "major_01",
    },
    {
        "id": "major_02_the_high_priestess", "number": 2, "name": "The High Priestess", "nameCzech": "Velekněžka",
        "keywords": ["intuice", "tajemství", "ticho"],
        "meaningUpright": "Odpověď už znáš uvnitř; vyplatí se ztišit a naslouchat intuici.",
        "meaningReversed": "Přehlížíš vlastní tušení nebo se něco důležitého drží pod pokličkou.",
        "imageName": "major_02",
    },
    {
        "id": "major_03_the_empress", "number": 3, "name": "The Empress", "nameCzech": "Císařovna",
        "keywords": ["hojnost", "péče", "tvořivost"],
        "meaningUpright": "Období růstu, smyslnosti a péče, která se vrací tomu, kdo ji dává.",
        "meaningReversed": "Vyčerpání z přílišné péče o druhé a málo prostoru pro sebe.",
        "imageName": "major_03",
    },
    {
        "id": "major_04_the_emperor", "number": 4, "name": "The Emperor", "nameCzech": "Císař",
        "keywords": ["struktura", "autorita", "stabilita"],
        "meaningUpright": "Pevná pravidla a jasné hranice ti teď dávají oporu.",
        "meaningReversed": "Rigidita, potřeba mít vše pod kontrolou nebo boj s autoritou.",
        "imageName": "major_04",
    },
    {
        "id": "major_05_the_hierophant", "number": 5, "name": "The Hierophant", "nameCzech": "Velekněz",
        "keywords": ["tradice", "učení", "hodnoty"],
        "meaningUpright": "Osvědčené cesty a moudrost druhých ti můžou ukázat směr.",
        "meaningReversed": "Zpochybňuješ pravidla, která už ti nesedí, a hledáš vlastní cestu.",
        "imageName": "major_05",
    },
    {
        "id": "major_06_the_lovers", "number": 6, "name": "The Lovers", "nameCzech": "Milenci",
        "keywords": ["volba", "spojení", "hodnoty"],
        "meaningUpright": "Hluboké spojení a volba, která odráží to, na čem ti opravdu záleží.",
        "meaningReversed": "Nesoulad mezi srdcem a rozumem nebo odkládané rozhodnutí.",
        "imageName": "major_06",
    },
    {
        "id": "major_07_the_chariot", "number": 7, "name": "The Chariot", "nameCzech": "Vůz",
        "keywords": ["odhodlání", "pohyb", "vítězství"],
        "meaningUpright": "Soustředěná vůle tě posouvá vpřed, i když táhnou síly různými směry.",
        "meaningReversed": "Ztráta směru, tlačení na sílu nebo pocit, že stojíš na místě.",
        "imageName": "major_07",
    },
    {
        "id": "major_08_strength", "number": 8, "name": "Strength", "nameCzech": "Síla",
        "keywords": ["odvaha", "trpělivost", "jemnost"],
        "meaningUpright": "Skutečná síla je klidná; zvládneš to laskavostí, ne tlakem.",
        "meaningReversed": "Pochybnosti o sobě nebo emoce, které přebírají otěže.",
        "imageName": "major_08",
    },
    {
        "id": "major_09_the_hermit", "number": 9, "name": "The Hermit", "nameCzech": "Poustevník",
        "keywords": ["samota", "hledání", "vhled"],
        "meaningUpright": "Čas stáhnout se, zpomalit a najít odpovědi v sobě.",
        "meaningReversed": "Izolace, která už neslouží, nebo útěk před vlastními myšlenkami.",
        "imageName": "major_09",
    },
    {
        "id": "major_10_wheel_of_fortune", "number": 10, "name": "Wheel of Fortune", "nameCzech": "Kolo štěstí",
        "keywords": ["cykly", "změna", "osud"],
        "meaningUpright": "Věci se dávají do pohybu; změna přichází a nese příležitost.",
        "meaningReversed": "Odpor vůči změně nebo pocit, že se točíš v kruhu.",
        "imageName": "major_10",
    },
    {
        "id": "major_11_justice", "number": 11, "name": "Justice", "nameCzech": "Spravedlnost",
        "keywords": ["pravda", "rovnováha", "důsledky"],
        "meaningUpright": "Jasný pohled na fakta a férové rozhodnutí, za kterým si stojíš.",
        "meaningReversed": "Nespravedlnost, vyhýbání se odpovědnosti nebo zkreslený úsudek.",
        "imageName": "major_11",
    },
    {
        "id": "major_12_the_hanged_man", "number": 12, "name": "The Hanged Man", "nameCzech": "Viselec",
        "keywords": ["pauza", "nadhled", "odevzdání"],
        "meaningUpright": "Zastavení ti dává nový úhel pohledu; nech věci chvíli být.",
        "meaningReversed": "Zbytečné čekání nebo oběti, které nikam nevedou.",
        "imageName": "major_12",
    },
    {
        "id": "major_13_death", "number": 13, "name": "Death", "nameCzech": "Smrt",
        "keywords": ["konec", "proměna", "uvolnění"],
        "meaningUpright": "Něco se uzavírá, aby mohlo vzniknout něco nového.",
        "meaningReversed": "Držíš se toho, co už skončilo, a brzdíš tím proměnu.",
        "imageName": "major_13",
    },
    {
        "id": "major_14_temperance", "number": 14, "name": "Temperance", "nameCzech": "Mírnost",
        "keywords": ["rovnováha", "umírněnost", "léčení"],
        "meaningUpright": "Hledání středu a trpělivé míchání protikladů přináší klid.",
        "meaningReversed": "Přehánění, netrpělivost nebo život mimo vlastní rytmus.",
        "imageName": "major_14",
    },
    {
        "id": "major_15_the_devil", "number": 15, "name": "The Devil", "nameCzech": "Ďábel",
        "keywords": ["pouta", "pokušení", "stín"],
        "meaningUpright": "Vzorce a závislosti, které tě drží víc, než si přiznáváš.",
        "meaningReversed": "Uvolňuješ se z pout a bereš si zpět vlastní moc.",
        "imageName": "major_15",
    },
    {
        "id": "major_16_the_tower", "number": 16, "name": "The Tower", "nameCzech": "Věž",
        "keywords": ["otřes", "odhalení", "zlom"],
        "meaningUpright": "Náhlá změna boří to, co stálo na vratkých základech.",
        "meaningReversed": "Odkládaný zlom nebo strach z nevyhnutelné změny.",
        "imageName": "major_16",
    },
    {
        "id": "major_17_the_star", "number": 17, "name": "The Star", "nameCzech": "Hvězda",
        "keywords": ["naděje", "inspirace", "obnova"],
        "meaningUpright": "Po bouři přichází klid a tichá naděje, že to dobře dopadne.",
        "meaningReversed": "Ztráta víry v sebe nebo únava, která zastírá výhled.",
        "imageName": "major_17",
    },
    {
        "id": "major_18_the_moon", "number": 18, "name": "The Moon", "nameCzech": "Měsíc",
        "keywords": ["iluze", "nejistota", "podvědomí"],
        "meaningUpright": "Ne všechno je takové, jak se zdá; obavy a sny se mísí.",
        "meaningReversed": "Mlha se zvedá a pravda začíná být zřetelnější.",
        "imageName": "major_18",
    },
    {
        "id": "major_19_the_sun", "number": 19, "name": "The Sun", "nameCzech": "Slunce",
        "keywords": ["radost", "úspěch", "vitalita"],
        "meaningUpright": "Jasno, radost a energie, kterou je vidět i zvenku.",
        "meaningReversed": "Radost je tlumená; dovol si ji, i když není dokonalá.",
        "imageName": "major_19",
    },
    {
        "id": "major_20_judgement", "number": 20, "name": "Judgement", "nameCzech": "Soud",
        "keywords": ["probuzení", "zúčtování", "volání"],
        "meaningUpright": "Čas zhodnotit minulost a odpovědět na vnitřní volání.",
        "meaningReversed": "Přísnost k sobě nebo ignorování toho, co už víš.",
        "imageName": "major_20",
    },
    {
        "id": "major_21_the_world", "number": 21, "name": "The World", "nameCzech": "Svět",
        "keywords": ["završení", "celistvost", "cesta"],
        "meaningUpright": "Kruh se uzavírá; sklízíš plody a jsi připravený na další kapitolu.",
        "meaningReversed": "Nedokončené věci, které ještě chtějí tvou pozornost.",
        "imageName": "major_21",
    },
]

"""
Built-in word tables used by the extraction passes.

- SUFFIXES / TITLES are matched case-insensitively (tokens are lower-cased and
  stripped of one trailing period before lookup), so entries are lower-case.
- PREFIXES / CONJUNCTIONS are matched exactly as written.

Multi-word titles are kept for completeness; single tokens never match them.
"""

from __future__ import annotations

from typing import Dict, FrozenSet


# ==========================================================
# SUFFIXES (generational, professional, academic)
# ==========================================================

SUFFIXES: FrozenSet[str] = frozenset({
    "esq", "esquire",
    "jr", "jnr", "sr", "snr",
    "2", "ii", "iii", "iv", "v",
    "clu", "chfc", "cfp",
    "md", "phd",
    "j.d.", "ll.m.", "m.d.", "d.o.", "d.c.", "p.c.", "ph.d.",
})


# ==========================================================
# SURNAME PARTICLES
# ==========================================================

PREFIXES: FrozenSet[str] = frozenset({
    "a", "ab", "antune", "ap", "abu", "al", "alm", "alt",
    "bab", "bäck", "bar", "bath", "bat", "beau", "beck", "ben", "berg", "bet",
    "bin", "bint", "birch", "björk", "björn", "bjur",
    "da", "dahl", "dal", "de", "degli", "dele", "del", "della", "der", "di",
    "dos", "du",
    "e", "ek", "el", "escob", "esch",
    "fleisch", "fitz", "fors",
    "gott", "griff",
    "haj", "haug", "holm",
    "ibn",
    "kauf", "kil", "koop", "kvarn",
    "la", "le", "lind", "lönn", "lund",
    "mac", "mhic", "mic", "mir",
    "na", "naka", "neder", "nic", "ni", "nin", "nord", "norr", "ny",
    "o", "ua", "ui'", "öfver", "ost", "över", "öz",
    "papa", "pour",
    "quarn",
    "skog", "skoog", "sten", "stor", "ström", "söder",
    "ter", "tre", "türk",
    "van", "väst", "väster", "vest", "von",
})


# ==========================================================
# TITLES / HONORIFICS
# ==========================================================

# The source list repeated "miss", "monsieur", "herr", "hr" and "frau", which
# reported those titles twice ("Miss, Miss"). Each entry appears once here.

TITLES: FrozenSet[str] = frozenset({
    "mr", "mrs", "ms", "miss", "dr", "herr", "monsieur", "hr", "frau",
    "a v m", "admiraal", "admiral", "air cdre", "air commodore", "air marshal",
    "air vice marshal", "alderman", "alhaji", "ambassador", "baron", "barones",
    "brig", "brig gen", "brig general", "brigadier", "brigadier general",
    "brother", "canon", "capt", "captain", "cardinal", "cdr", "chief", "cik",
    "cmdr", "coach", "col", "colonel", "commandant", "commander",
    "commissioner", "commodore", "comte", "comtessa", "congressman",
    "conseiller", "consul", "conte", "contessa", "corporal", "councillor",
    "count", "countess", "crown prince", "crown princess", "dame", "datin",
    "dato", "datuk", "datuk seri", "deacon", "deaconess", "dean", "dhr",
    "dipl ing", "doctor", "dott", "dott sa", "dr ing", "dra", "drs",
    "embajador", "embajadora", "en", "encik", "eng", "eur ing", "exma sra",
    "exmo sr", "f o", "father", "first lieutient", "first officer",
    "flt lieut", "flying officer", "fr", "fraulein", "fru", "gen", "generaal",
    "general", "governor", "graaf", "gravin", "group captain", "grp capt",
    "h e dr", "h h", "h m", "h r h", "hajah", "haji", "hajim", "her highness",
    "her majesty", "high chief", "his highness", "his holiness",
    "his majesty", "hon", "hra", "ing", "ir", "jonkheer", "judge", "justice",
    "khun ying", "kolonel", "lady", "lcda", "lic", "lieut", "lieut cdr",
    "lieut col", "lieut gen", "lord", "m", "m l", "m r", "madame",
    "mademoiselle", "maj gen", "major", "master", "mevrouw", "mlle", "mme",
    "monsignor", "mstr", "nti", "pastor", "president", "prince", "princess",
    "princesse", "prinses", "prof", "prof sir", "professor", "puan",
    "puan sri", "rabbi", "rear admiral", "rev", "rev canon", "rev dr",
    "rev mother", "reverend", "rva", "senator", "sergeant", "sheikh",
    "sheikha", "sig", "sig na", "sig ra", "sir", "sister", "sqn ldr", "sr",
    "sr d", "sra", "srta", "sultan", "tan sri", "tan sri dato", "tengku",
    "teuku", "than puying", "the hon dr", "the hon justice", "the hon miss",
    "the hon mr", "the hon mrs", "the hon ms", "the hon sir", "the very rev",
    "toh puan", "tun", "vice admiral", "viscount", "viscountess", "wg cdr",
})


# ==========================================================
# CONJUNCTIONS
# ==========================================================

CONJUNCTIONS: FrozenSet[str] = frozenset({
    "&", "and", "et", "e", "of", "the", "und", "y",
})


LEXICONS: Dict[str, FrozenSet[str]] = {
    "suffixes": SUFFIXES,
    "titles": TITLES,
    "prefixes": PREFIXES,
    "conjunctions": CONJUNCTIONS,
}

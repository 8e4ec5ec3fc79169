"""
Lexicon — Frozen Keyword Dictionaries

Everything the classifiers match against lives here:
  1. Outlet identifier groups (4 Catholic tiers, 5 secular tiers)
  2. Narrative frame dictionaries (8 frames, declared order is the tie-break)
  3. Actor dictionaries (7 categories)
  4. NPI weights and narrative phase boundaries

These are part of the published corpus contract. Changing any of them
changes what the exported corpora mean, so they are immutable module
constants stamped with LEXICON_VERSION. Detectors receive them at
construction time and never modify them.

Terms are lowercase Croatian surface forms. Stems and variants are
listed explicitly; matching is substring-based, so a term inside a
longer word still counts. A handful of entries are light regex
fragments ("slobodna.*dalmacija", "ika\\.hkm").
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

LEXICON_VERSION = "1.0.0"


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class KeywordGroup:
    """A named set of regex fragments, matched as one alternation."""
    name: str
    terms: tuple[str, ...]
    label: Optional[str] = None   # Output label, when it differs from name

    def pattern(self) -> str:
        return "(?:" + "|".join(self.terms) + ")"


@dataclass(frozen=True)
class NarrativePhase:
    """Half-open date interval [start, end). None means unbounded."""
    label: str
    start: Optional[date]
    end: Optional[date]

    def contains(self, day: date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day >= self.end:
            return False
        return True


# ============================================================
# OUTLET GROUPS
# ============================================================

CATHOLIC_GROUPS: tuple[KeywordGroup, ...] = (
    KeywordGroup(
        name="catholic_official",
        label="Official Church",
        terms=(
            r"ika\.hkm", "glas.koncila", "glas-koncila", r"hkm\.hr", "laudato",
            "ktabkbih", r"ika\.hr",
        ),
    ),
    KeywordGroup(
        name="catholic_radio",
        label="Catholic Radio",
        terms=("radiomarija", "radio.marija", r"hkr\.hr", r"radio\.hkm"),
    ),
    KeywordGroup(
        name="catholic_portals",
        label="Catholic Portals",
        terms=(
            r"bitno\.net", "katolicki", r"vjera\.hr", "svetiste", "zupa",
            "biskupija", "nadbiskupija", "franjevci", "dominikanci",
        ),
    ),
    KeywordGroup(
        name="catholic_aligned",
        label="Catholic Aligned",
        terms=(
            r"narod\.hr", r"dnevno\.hr", "7dnevno", r"direktno\.hr",
            "maxportal", "projekt-velebit", "hrvatskadobrobit",
        ),
    ),
)

SECULAR_GROUPS: tuple[KeywordGroup, ...] = (
    KeywordGroup(
        name="conservative",
        label="Conservative",
        terms=("vecernji", r"hrt\.hr", "nacional", r"glas\.hr"),
    ),
    KeywordGroup(
        name="liberal",
        label="Liberal",
        terms=(r"index\.hr", r"telegram\.hr", r"n1\.hr", "n1info", r"net\.hr", "tportal"),
    ),
    KeywordGroup(
        name="tabloid",
        label="Tabloid",
        terms=("24sata", "jutarnji", r"rtl\.hr", r"nova\.hr", r"dnevnik\.hr", r"story\.hr"),
    ),
    KeywordGroup(
        name="regional",
        label="Regional",
        terms=(
            "slobodna.*dalmacija", "slobodnadalmacija", "novi.*list", "novilist",
            "glas.slavonije", "glas-slavonije", "dubrovacki", "zadarskilist", "034portal",
        ),
    ),
    KeywordGroup(
        name="business",
        label="Business",
        terms=(
            "poslovni", r"lider\.hr", r"bug\.hr", "netokracija", "forbes.*hr", "poslovnipuls",
        ),
    ),
)

MEDIA_TYPE_CATHOLIC = "Catholic"
MEDIA_TYPE_OTHER = "Other"

MEDIA_TYPES: tuple[str, ...] = (
    MEDIA_TYPE_CATHOLIC,
    *(g.label for g in SECULAR_GROUPS),
    MEDIA_TYPE_OTHER,
)
CATHOLIC_SUBCATEGORIES: tuple[str, ...] = tuple(g.label for g in CATHOLIC_GROUPS)


# ============================================================
# NARRATIVE FRAMES (declaration order = dominant-frame tie-break)
# ============================================================

FRAME_DICTIONARIES: tuple[KeywordGroup, ...] = (
    KeywordGroup("MORAL_DECAY", (
        "moralni pad", "moralni raspad", "moralna kriza",
        "dekadencija", "dekadentan",
        "grijeh", "griješan", "grješan",
        "sekularizacija", "bezbožn",
        "kultura smrti", "civilizacija smrti",
        "hedonizam", "relativizam", "nihilizam",
        "propadanje", "propast vrijednosti",
        "moralni relativizam", "bezakonje",
    )),
    KeywordGroup("FOREIGN_THREAT", (
        "nametanje", "nameće nam",
        "briselski diktat", "diktat iz brisela",
        "soros", "george soros",
        "globalizam", "globalist",
        "novi svjetski poredak", "nwo",
        "strano uplitanje", "strana agenda",
        "ideološki import", "uvoz ideologije",
        "međunarodne elite", "svjetske elite",
    )),
    KeywordGroup("INSTITUTIONAL_DISTRUST", (
        "laž", "lažu nas", "lažu",
        "manipulacija", "manipuliraju",
        "cenzura", "cenzuriraju",
        "propaganda", "propagandni",
        "duboka država", "deep state",
        "korupcija", "korumpirani",
        "sustav je pokvaren", "pokvareni sustav",
        "ne vjerujem", "nevjerodostojan",
    )),
    KeywordGroup("TRADITIONAL_VALUES", (
        "tradicija", "tradicionalne vrijednosti",
        "obitelj", "obiteljs", "obiteljske vrijednosti",
        "brak", "brak između muškarca i žene",
        # "zavjera" (conspiracy) contains "vjera"
        "(?<!za)vjera", "vjernick", "kršćanin",
        "domovina", "domoljublje", "domoljub",
        "crkva", "crkveni", "župn",
        "nasljeđe", "baština",
        "prirodni zakon", "božji zakon",
    )),
    KeywordGroup("SOVEREIGNTY", (
        "suverenitet", "suverenost",
        "neovisnost", "nezavisnost",
        "referendum", "volja naroda",
        "nacionalni interes", "hrvatski interes",
        "samoodređenje", "samobitnost",
        "ustavni identitet", "identitetski",
        "predaja suvereniteta",
    )),
    KeywordGroup("CONSPIRACY", (
        "zavjera", "konspiracija",
        "skrivena agenda", "skriveni plan",
        "kontrola populacije", "depopulacija",
        "big pharma", "farmaceutska mafija",
        "great reset", "veliki reset",
        "nova normalnost",
        "agenda 2030", "agenda2030",
        "planska demolucija", "planski",
        "iza kulisa", "marioneta",
        "orwellovski", "totalitarizam", "tiranja",
        "čipiranje", "5g", "bill gates",
    )),
    KeywordGroup("FAITH_DEFENCE", (
        "kršćanofobija", "kristofobija",
        "progon kršćana", "progon vjernika",
        "napad na crkvu", "napadi na crkvu",
        "napad na vjeru", "napadi na vjernike",
        "evangelizacija", "nova evangelizacija",
        "vjerske slobode", "sloboda vjeroispovijesti",
        "obrana vjere", "obrana kršćanstva",
        "zaštita kršćanskih",
        "diskriminacija vjernika", "marginalizacija vjere",
    )),
    KeywordGroup("MEDIA_CRITIQUE", (
        "mainstream mediji", "medijski mainstr",
        "fake news", "lažne vijesti",
        "pristranost", "pristrani mediji",
        "alternativni mediji", "nezavisni mediji",
        "medijska propaganda", "medijska manipulacija",
        "novinarska etika", "neetički",
        "prešućuju", "prešućivanje",
        "medijski mrak", "medijska blokada",
        "jednoumlje", "narativ",
    )),
)

FRAME_NAMES: tuple[str, ...] = tuple(g.name for g in FRAME_DICTIONARIES)
NO_FRAME = "NONE"


# ============================================================
# ACTORS
# ============================================================

ACTOR_DICTIONARIES: tuple[KeywordGroup, ...] = (
    KeywordGroup("CHURCH", (
        "crkva", "crkveni", "biskupi", "biskup",
        "papa", "papa franjo", "sveti otac",
        "vatikan", "sveta stolica",
        "bozanić", "bozanic", "uzinić", "uzinovic",
        "kardinal", "nadbiskup", "župnik",
        "hbk", "biskupska konferencija",
    )),
    KeywordGroup("GOVERNMENT", (
        "vlada", "premijer", "predsjednik vlade",
        "plenković", "plenkovic", "milanović", "milanovic",
        "sabor", "saborski zastupnik",
        "ministar", "ministarstvo",
        "hdz", "sdp", "most", "mozemo", "možemo",
        "domovinski pokret",
    )),
    KeywordGroup("EU_ACTORS", (
        "europska komisija", "europski parlament",
        "brisel", "bruxelles",
        "von der leyen", "vijeće europe",
        "europski sud", "echr",
        "eu institucije",
    )),
    KeywordGroup("NGO_CIVIL", (
        "udruga", "udruge", "nevladina organizacija",
        "civilno društvo", "civilni sektor",
        "aktivist", "aktivizam",
        "gong", "kuća ljudskih prava",
        "amnesty", "transparency",
    )),
    KeywordGroup("SCIENTISTS", (
        "znanstvenik", "znanstvenica",
        "stručnjak", "stručnjakinja", "ekspert",
        "epidemiolog", "imunolog", "virolog",
        "who", "hzjz",
        "istraživač", "akademik", "profesor",
        "institut", "fakultet",
    )),
    KeywordGroup("MEDIA_ACTORS", (
        "novinar", "novinarka", "novinarstvo",
        "mediji", "urednik", "uredništvo",
        "faktograf", "fact-check",
        "reportaža", "redakcija",
    )),
    KeywordGroup("FAMILY_ORGS", (
        "u ime obitelji", "vigilare",
        "hod za život", "hod za zivot",
        "centar za obnovu kulture",
        "glas roditelja", "roditeljski",
        "pravo na život", "pro life",
    )),
)

ACTOR_NAMES: tuple[str, ...] = tuple(g.name for g in ACTOR_DICTIONARIES)


# ============================================================
# DERIVED INDICES
# ============================================================

# Narrative Proximity Index: frame -> weight
NPI_WEIGHTS: dict[str, float] = {
    "CONSPIRACY": 2.0,
    "FOREIGN_THREAT": 1.5,
    "INSTITUTIONAL_DISTRUST": 1.5,
    "MEDIA_CRITIQUE": 1.0,
}

NARRATIVE_PHASES: tuple[NarrativePhase, ...] = (
    NarrativePhase("COVID Peak (early 2021)", None, date(2021, 7, 1)),
    NarrativePhase("Post-Vaccine Debate", date(2021, 7, 1), date(2022, 2, 24)),
    NarrativePhase("Ukraine and Energy Crisis", date(2022, 2, 24), date(2022, 10, 1)),
    NarrativePhase("Euro Adoption", date(2022, 10, 1), date(2023, 1, 15)),
    NarrativePhase("Culture Wars Period", date(2023, 1, 15), date(2024, 1, 1)),
    NarrativePhase("Election Run-up 2024", date(2024, 1, 1), None),
)

PHASE_OTHER = "Other"
PHASE_LABELS: tuple[str, ...] = tuple(p.label for p in NARRATIVE_PHASES) + (PHASE_OTHER,)

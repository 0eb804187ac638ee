"""Word replacement tables for abbreviating journal names.

Applied in order: multi-word phrases first, then single words looked up
in INSTITUTIONS, ABBREVIATIONS and GEOGRAPHY; words in REMOVALS are
dropped. Lookups are case-sensitive, so a capitalized "The" that begins
a journal's name survives while a lowercase "the" does not.

Reference: The Bluebook, Tables T10 (geography) and T13 (periodicals).
"""

from typing import Final

MULTIWORD: Final[dict[str, str]] = {
    "Boston College": "B.C.",
    "Boston University": "B.U.",
    "Case Western Reserve": "Case W. Rsrv.",
    "District of Columbia": "D.C.",
    "George Mason": "Geo. Mason",
    "George Washington": "Geo. Wash.",
    "New England": "New Eng.",
    "New Hampshire": "N.H.",
    "New Jersey": "N.J.",
    "New Mexico": "N.M.",
    "New York": "N.Y.",
    "North Carolina": "N.C.",
    "North Dakota": "N.D.",
    "Rhode Island": "R.I.",
    "South Carolina": "S.C.",
    "South Dakota": "S.D.",
    "United States": "U.S.",
    "West Virginia": "W. Va.",
}

INSTITUTIONS: Final[dict[str, str]] = {
    "College": "Coll.",
    "Columbia": "Colum.",
    "Georgetown": "Geo.",
    "Harvard": "Harv.",
    "Institute": "Inst.",
    "Northwestern": "Nw.",
    "School": "Sch.",
    "Stanford": "Stan.",
    "University": "U.",
    "Vanderbilt": "Vand.",
}

ABBREVIATIONS: Final[dict[str, str]] = {
    "Academy": "Acad.",
    "Administrative": "Admin.",
    "Advocacy": "Advoc.",
    "American": "Am.",
    "Annual": "Ann.",
    "Appellate": "App.",
    "Association": "Ass'n",
    "Bar": "B.",
    "Business": "Bus.",
    "Civil": "Civ.",
    "Commercial": "Com.",
    "Comparative": "Compar.",
    "Constitutional": "Const.",
    "Contemporary": "Contemp.",
    "Corporate": "Corp.",
    "Criminal": "Crim.",
    "Development": "Dev.",
    "Economic": "Econ.",
    "Economics": "Econ.",
    "Education": "Educ.",
    "Employment": "Emp.",
    "Environmental": "Env't",
    "Family": "Fam.",
    "Federal": "Fed.",
    "Financial": "Fin.",
    "Forum": "F.",
    "Global": "Glob.",
    "Government": "Gov't",
    "History": "Hist.",
    "Human": "Hum.",
    "Immigration": "Immigr.",
    "Intellectual": "Intell.",
    "International": "Int'l",
    "Journal": "J.",
    "Justice": "Just.",
    "Labor": "Lab.",
    "Law": "L.",
    "Legislation": "Legis.",
    "Liability": "Liab.",
    "Litigation": "Litig.",
    "Management": "Mgmt.",
    "Medical": "Med.",
    "Medicine": "Med.",
    "National": "Nat'l",
    "Policy": "Pol'y",
    "Political": "Pol.",
    "Practice": "Prac.",
    "Procedure": "Proc.",
    "Products": "Prod.",
    "Property": "Prop.",
    "Public": "Pub.",
    "Quarterly": "Q.",
    "Regulation": "Regul.",
    "Research": "Rsch.",
    "Review": "Rev.",
    "Rights": "Rts.",
    "Science": "Sci.",
    "Social": "Soc.",
    "Society": "Soc'y",
    "Studies": "Stud.",
    "Taxation": "Tax'n",
    "Technology": "Tech.",
    "Transnational": "Transnat'l",
    "and": "&",
}

GEOGRAPHY: Final[dict[str, str]] = {
    "Alabama": "Ala.",
    "America": "Am.",
    "Arizona": "Ariz.",
    "Arkansas": "Ark.",
    "California": "Cal.",
    "Colorado": "Colo.",
    "Connecticut": "Conn.",
    "Delaware": "Del.",
    "Europe": "Eur.",
    "European": "Eur.",
    "Florida": "Fla.",
    "Georgia": "Ga.",
    "Illinois": "Ill.",
    "Indiana": "Ind.",
    "Kansas": "Kan.",
    "Kentucky": "Ky.",
    "Louisiana": "La.",
    "Maryland": "Md.",
    "Massachusetts": "Mass.",
    "Michigan": "Mich.",
    "Minnesota": "Minn.",
    "Mississippi": "Miss.",
    "Missouri": "Mo.",
    "Montana": "Mont.",
    "Nebraska": "Neb.",
    "Nevada": "Nev.",
    "Oklahoma": "Okla.",
    "Oregon": "Or.",
    "Pennsylvania": "Pa.",
    "Tennessee": "Tenn.",
    "Texas": "Tex.",
    "Virginia": "Va.",
    "Washington": "Wash.",
    "Wisconsin": "Wis.",
    "Wyoming": "Wyo.",
}

REMOVALS: Final[frozenset[str]] = frozenset(
    {"a", "an", "at", "for", "in", "of", "on", "the", "to"}
)

# Static vocabulary used by the doctor search query parser.
# Every table is an ordered tuple: the parser stops at the first match, so the
# declaration order decides which entry wins when a query contains several.

SPECIALTY_SYNONYMS: tuple[tuple[str, str], ...] = (
    ("cardiologist", "Cardiology"),
    ("cardiology", "Cardiology"),
    ("heart", "Cardiology"),
    ("cardiac", "Cardiology"),
    ("dentist", "Dentist"),
    ("dental", "Dentist"),
    ("orthodontist", "Dentist"),
    ("dermatologist", "Dermatology"),
    ("dermatology", "Dermatology"),
    ("skin", "Dermatology"),
    ("neurologist", "Neurology"),
    ("neurology", "Neurology"),
    ("brain", "Neurology"),
    ("orthopedic", "Orthopedic Surgery"),
    ("orthopedist", "Orthopedic Surgery"),
    ("bone", "Orthopedic Surgery"),
    ("psychiatrist", "Psychiatry"),
    ("psychiatry", "Psychiatry"),
    ("mental", "Psychiatry"),
    ("psychologist", "Psychiatry"),
    ("pediatrician", "Pediatrics"),
    ("pediatrics", "Pediatrics"),
    ("children", "Pediatrics"),
    ("child", "Pediatrics"),
    ("ophthalmologist", "Ophthalmology"),
    ("ophthalmology", "Ophthalmology"),
    ("eye", "Ophthalmology"),
    ("optometrist", "Ophthalmology"),
    ("gynecologist", "Obstetrics/Gynecology"),
    ("gynecology", "Obstetrics/Gynecology"),
    ("obgyn", "Obstetrics/Gynecology"),
    ("obstetrician", "Obstetrics/Gynecology"),
    ("oncologist", "Oncology"),
    ("oncology", "Oncology"),
    ("cancer", "Oncology"),
    ("urologist", "Urology"),
    ("urology", "Urology"),
    ("gastroenterologist", "Gastroenterology"),
    ("gastroenterology", "Gastroenterology"),
    ("gi", "Gastroenterology"),
    ("pulmonologist", "Pulmonology"),
    ("pulmonology", "Pulmonology"),
    ("lung", "Pulmonology"),
    ("endocrinologist", "Endocrinology"),
    ("endocrinology", "Endocrinology"),
    ("diabetes", "Endocrinology"),
    ("rheumatologist", "Rheumatology"),
    ("rheumatology", "Rheumatology"),
    ("nephrologist", "Nephrology"),
    ("nephrology", "Nephrology"),
    ("kidney", "Nephrology"),
)

PROCEDURE_KEYWORDS: tuple[str, ...] = (
    "ultrasound",
    "x-ray",
    "xray",
    "mri",
    "ct scan",
    "ctscan",
    "surgery",
    "procedure",
    "test",
    "scan",
    "biopsy",
    "colonoscopy",
    "endoscopy",
    "echocardiogram",
    "stress test",
    "mammogram",
    "pap smear",
    "vaccination",
    "vaccine",
    "injection",
    "screening",
)

# Informational only: reported back to the client, never used as a filter.
LOCATION_KEYWORDS: tuple[str, ...] = (
    "near",
    "in",
    "at",
    "around",
    "close to",
    "downtown",
    "uptown",
    "suburb",
    "suburbs",
)

US_STATES: tuple[tuple[str, str], ...] = (
    ("alabama", "AL"),
    ("alaska", "AK"),
    ("arizona", "AZ"),
    ("arkansas", "AR"),
    ("california", "CA"),
    ("colorado", "CO"),
    ("connecticut", "CT"),
    ("delaware", "DE"),
    ("florida", "FL"),
    ("georgia", "GA"),
    ("hawaii", "HI"),
    ("idaho", "ID"),
    ("illinois", "IL"),
    ("indiana", "IN"),
    ("iowa", "IA"),
    ("kansas", "KS"),
    ("kentucky", "KY"),
    ("louisiana", "LA"),
    ("maine", "ME"),
    ("maryland", "MD"),
    ("massachusetts", "MA"),
    ("michigan", "MI"),
    ("minnesota", "MN"),
    ("mississippi", "MS"),
    ("missouri", "MO"),
    ("montana", "MT"),
    ("nebraska", "NE"),
    ("nevada", "NV"),
    ("new hampshire", "NH"),
    ("new jersey", "NJ"),
    ("new mexico", "NM"),
    ("new york", "NY"),
    ("north carolina", "NC"),
    ("north dakota", "ND"),
    ("ohio", "OH"),
    ("oklahoma", "OK"),
    ("oregon", "OR"),
    ("pennsylvania", "PA"),
    ("rhode island", "RI"),
    ("south carolina", "SC"),
    ("south dakota", "SD"),
    ("tennessee", "TN"),
    ("texas", "TX"),
    ("utah", "UT"),
    ("vermont", "VT"),
    ("virginia", "VA"),
    ("washington", "WA"),
    ("west virginia", "WV"),
    ("wisconsin", "WI"),
    ("wyoming", "WY"),
)

# Lower-case; matched as substrings of the lower-cased query.
MAJOR_CITIES: tuple[str, ...] = (
    "chicago",
    "new york",
    "los angeles",
    "houston",
    "phoenix",
    "philadelphia",
    "san antonio",
    "san diego",
    "dallas",
    "san jose",
    "austin",
    "jacksonville",
    "san francisco",
    "columbus",
    "fort worth",
    "charlotte",
    "detroit",
    "el paso",
    "seattle",
    "denver",
    "washington",
    "memphis",
    "boston",
    "nashville",
    "baltimore",
    "oklahoma city",
    "portland",
    "las vegas",
    "milwaukee",
    "albuquerque",
    "tucson",
    "fresno",
    "sacramento",
    "kansas city",
    "mesa",
    "atlanta",
    "omaha",
    "colorado springs",
    "raleigh",
    "virginia beach",
    "miami",
    "oakland",
    "minneapolis",
    "tulsa",
    "cleveland",
    "wichita",
    "arlington",
)

CANONICAL_SPECIALTIES: frozenset[str] = frozenset(value for _, value in SPECIALTY_SYNONYMS)
STATE_CODES: frozenset[str] = frozenset(code for _, code in US_STATES)

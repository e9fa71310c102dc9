# core/datasets.py
"""
Static baseline datasets shown before any upload.

Sources: CYSTAT Labour Force Survey (employment by gender), Eurostat
une_rt_m / lfsa_ergan (monthly unemployment, headline rates). Sector and wage
tables are rounded illustrative figures.
"""

from __future__ import annotations

import copy


DEFAULT_MONTHLY_TREND = [
    {"month": "Jan 2025", "Cyprus": 4.8, "EU": 6.1, "date": "2025-01"},
    {"month": "Feb 2025", "Cyprus": 4.7, "EU": 6.0, "date": "2025-02"},
    {"month": "Mar 2025", "Cyprus": 4.6, "EU": 5.9, "date": "2025-03"},
    {"month": "Apr 2025", "Cyprus": 4.5, "EU": 5.8, "date": "2025-04"},
    {"month": "May 2025", "Cyprus": 4.6, "EU": 5.9, "date": "2025-05"},
]

DEFAULT_METRICS = {
    "cyprus": {
        "unemploymentRate": 4.6,
        "employmentRate": 75.9,
        "averageSalary": 2352.0,
        "youthUnemployment": 14.0,
        "labourForceParticipation": 65.1,
    },
    "eu": {
        "unemploymentRate": 5.9,
        "employmentRate": 75.8,
        "averageSalary": 2750.0,
        "youthUnemployment": 14.8,
        "labourForceParticipation": 74.9,
    },
}

# Labour force by gender, 2002-2024.
EMPLOYMENT_BY_GENDER = [
    {"year": 2002, "total": 326075, "male": 181489, "female": 144585, "participationRate": 61.9},
    {"year": 2003, "total": 341203, "male": 188733, "female": 152470, "participationRate": 63.2},
    {"year": 2004, "total": 354686, "male": 197787, "female": 156899, "participationRate": 63.0},
    {"year": 2005, "total": 367524, "male": 206395, "female": 161129, "participationRate": 63.2},
    {"year": 2006, "total": 374285, "male": 208403, "female": 165882, "participationRate": 63.5},
    {"year": 2007, "total": 393377, "male": 216805, "female": 176572, "participationRate": 64.4},
    {"year": 2008, "total": 397374, "male": 219184, "female": 178191, "participationRate": 64.2},
    {"year": 2009, "total": 404622, "male": 215967, "female": 188655, "participationRate": 63.7},
    {"year": 2010, "total": 421628, "male": 222377, "female": 199252, "participationRate": 64.3},
    {"year": 2011, "total": 432165, "male": 227143, "female": 205022, "participationRate": 63.7},
    {"year": 2012, "total": 436742, "male": 230198, "female": 206544, "participationRate": 63.4},
    {"year": 2013, "total": 433949, "male": 227806, "female": 206143, "participationRate": 63.3},
    {"year": 2014, "total": 432288, "male": 223168, "female": 209120, "participationRate": 63.7},
    {"year": 2015, "total": 420961, "male": 216156, "female": 204805, "participationRate": 62.3},
    {"year": 2016, "total": 417069, "male": 215602, "female": 201467, "participationRate": 61.3},
    {"year": 2017, "total": 426789, "male": 221782, "female": 205006, "participationRate": 61.6},
    {"year": 2018, "total": 437495, "male": 228509, "female": 208985, "participationRate": 62.4},
    {"year": 2019, "total": 457246, "male": 241488, "female": 215759, "participationRate": 63.7},
    {"year": 2020, "total": 464839, "male": 247940, "female": 216900, "participationRate": 63.4},
    {"year": 2021, "total": 479000, "male": 253187, "female": 225813, "participationRate": 63.9},
    {"year": 2022, "total": 497967, "male": 259203, "female": 238764, "participationRate": 65.1},
    {"year": 2023, "total": 509585, "male": 262076, "female": 247510, "participationRate": 65.5},
    {"year": 2024, "total": 511862, "male": 264630, "female": 247232, "participationRate": 65.1},
]

# Unemployment rate (%) by age group.
UNEMPLOYMENT_BY_AGE = [
    {"ageGroup": "15-24", "Cyprus": 14.0, "EU": 14.8},
    {"ageGroup": "25-34", "Cyprus": 5.9, "EU": 6.9},
    {"ageGroup": "35-44", "Cyprus": 3.8, "EU": 5.0},
    {"ageGroup": "45-54", "Cyprus": 3.6, "EU": 4.6},
    {"ageGroup": "55-64", "Cyprus": 3.9, "EU": 4.5},
]

# Unemployment rate (%) by gender.
UNEMPLOYMENT_BY_GENDER = [
    {"gender": "Male", "Cyprus": 4.3, "EU": 5.7},
    {"gender": "Female", "Cyprus": 4.9, "EU": 6.1},
]

# Share of Cyprus employment (%) by NACE sector.
SECTORAL_EMPLOYMENT = [
    {"sector": "Wholesale & Retail Trade", "share": 15.8},
    {"sector": "Accommodation & Food", "share": 9.6},
    {"sector": "Public Administration", "share": 8.1},
    {"sector": "Education", "share": 8.4},
    {"sector": "Construction", "share": 8.9},
    {"sector": "Health & Social Work", "share": 7.2},
    {"sector": "Manufacturing", "share": 7.0},
    {"sector": "Financial Services", "share": 5.5},
    {"sector": "ICT", "share": 5.9},
    {"sector": "Other", "share": 23.6},
]

# Average gross monthly wage (EUR) by sector.
WAGES_BY_SECTOR = [
    {"sector": "Financial Services", "Cyprus": 3820, "EU": 4510},
    {"sector": "ICT", "Cyprus": 3650, "EU": 4280},
    {"sector": "Public Administration", "Cyprus": 3190, "EU": 3350},
    {"sector": "Education", "Cyprus": 2980, "EU": 3120},
    {"sector": "Health & Social Work", "Cyprus": 2410, "EU": 2950},
    {"sector": "Manufacturing", "Cyprus": 1980, "EU": 2890},
    {"sector": "Construction", "Cyprus": 1870, "EU": 2610},
    {"sector": "Wholesale & Retail Trade", "Cyprus": 1750, "EU": 2330},
    {"sector": "Accommodation & Food", "Cyprus": 1520, "EU": 1780},
]


def default_monthly_trend() -> list[dict]:
    return copy.deepcopy(DEFAULT_MONTHLY_TREND)


def default_metrics() -> dict[str, dict[str, float]]:
    return copy.deepcopy(DEFAULT_METRICS)


def latest_employment() -> dict:
    return max(EMPLOYMENT_BY_GENDER, key=lambda r: r["year"])

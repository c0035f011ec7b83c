from dataclasses import dataclass


@dataclass(frozen=True)
class District:
    code: str
    name: str

    def __str__(self):
        return f"{self.name} ({self.code})"

    @property
    def name_token(self):
        """First word of the name, used when matching free-text localities"""
        parts = self.name.split()
        return parts[0].upper() if parts else ''


# Bihar districts covered by the dashboard, in display order
DISTRICTS = (
    District('0501', 'PATNA'),
    District('0502', 'NALANDA'),
    District('0506', 'JEHANABAD'),
    District('0518', 'SAMASTIPUR'),
    District('0544', 'SUPAUL'),
    District('0504', 'ROHTAS'),
    District('0508', 'NAWADA'),
    District('0513', 'PURBI CHAMPARAN'),
    District('0520', 'MADHUBANI'),
    District('0541', 'ARARIA'),
)

_BY_CODE = {district.code: district for district in DISTRICTS}


def get_district(code):
    """Return the district for a code, or None when it is not listed"""
    if not code:
        return None
    return _BY_CODE.get(str(code).strip())


def district_name(code, default='Unknown'):
    district = get_district(code)
    return district.name if district else default


def match_district(locality, districts=DISTRICTS):
    """
    Best-effort match of a reverse-geocoded locality against known districts.

    The first word of each district name is looked for, case-insensitively,
    anywhere in the locality string. The first hit in list order wins.
    Multi-word names and homonyms can mismatch.
    """
    if not locality:
        return None

    haystack = str(locality).upper()

    for district in districts:
        token = district.name_token
        if token and token in haystack:
            return district

    return None

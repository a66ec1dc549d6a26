"""Sports team color table and league ordering."""

from __future__ import annotations

from glowkit.core.library.models import SportsTeam

# league code -> (folder title, sort order)
LEAGUES: dict[str, tuple[str, int]] = {
    "NFL": ("NFL", 0),
    "NBA": ("NBA", 1),
    "MLB": ("MLB", 2),
    "NHL": ("NHL", 3),
    "MLS": ("MLS", 4),
    "WNBA": ("WNBA", 5),
    "NWSL": ("NWSL", 6),
}

SPORTS_TEAMS: tuple[SportsTeam, ...] = (
    SportsTeam("Chiefs", "NFL", "Kansas City", ("#E31837", "#FFB81C"), nickname="KC"),
    SportsTeam("49ers", "NFL", "San Francisco", ("#AA0000", "#B3995D"), nickname="SF"),
    SportsTeam("Cowboys", "NFL", "Dallas", ("#003594", "#869397")),
    SportsTeam("Eagles", "NFL", "Philadelphia", ("#004C54", "#A5ACAF")),
    SportsTeam("Bills", "NFL", "Buffalo", ("#00338D", "#C60C30")),
    SportsTeam("Dolphins", "NFL", "Miami", ("#008E97", "#F58220")),
    SportsTeam("Patriots", "NFL", "New England", ("#002244", "#C60C30")),
    SportsTeam("Jets", "NFL", "New York", ("#125740", "#FFFFFF"), nickname="NY"),
    SportsTeam("Ravens", "NFL", "Baltimore", ("#241773", "#9E7C0C")),
    SportsTeam("Steelers", "NFL", "Pittsburgh", ("#FFB612", "#101820")),
    SportsTeam("Bengals", "NFL", "Cincinnati", ("#FB4F14", "#000000")),
    SportsTeam("Browns", "NFL", "Cleveland", ("#311D00", "#FF3C00")),
    SportsTeam("Texans", "NFL", "Houston", ("#03202F", "#A71930")),
    SportsTeam("Colts", "NFL", "Indianapolis", ("#002C5F", "#FFFFFF")),
    SportsTeam("Jaguars", "NFL", "Jacksonville", ("#101820", "#D7A22A")),
    SportsTeam("Titans", "NFL", "Tennessee", ("#0C2340", "#4B92DB")),
    SportsTeam("Broncos", "NFL", "Denver", ("#FB4F14", "#002244")),
    SportsTeam("Chargers", "NFL", "Los Angeles", ("#0080C6", "#FFC20E"), nickname="LA"),
    SportsTeam("Raiders", "NFL", "Las Vegas", ("#000000", "#A5ACAF")),
    SportsTeam("Bears", "NFL", "Chicago", ("#0B162A", "#C83803")),
    SportsTeam("Lions", "NFL", "Detroit", ("#0076B6", "#B0B7BC")),
    SportsTeam("Packers", "NFL", "Green Bay", ("#203731", "#FFB612")),
    SportsTeam("Vikings", "NFL", "Minnesota", ("#4F2683", "#FFC62F")),
    SportsTeam("Falcons", "NFL", "Atlanta", ("#A71930", "#000000")),
    SportsTeam("Panthers", "NFL", "Carolina", ("#0085CA", "#101820")),
    SportsTeam("Saints", "NFL", "New Orleans", ("#D3BC8D", "#101820")),
    SportsTeam("Buccaneers", "NFL", "Tampa Bay", ("#D50A0A", "#34302B")),
    SportsTeam("Cardinals", "NFL", "Arizona", ("#97233F", "#FFB612")),
    SportsTeam("Rams", "NFL", "Los Angeles", ("#003594", "#FFA300")),
    SportsTeam("Seahawks", "NFL", "Seattle", ("#002244", "#69BE28")),
    SportsTeam("Commanders", "NFL", "Washington", ("#5A1414", "#FFB612")),
    SportsTeam("Giants", "NFL", "New York", ("#0B2265", "#A71930")),
    SportsTeam("Lakers", "NBA", "Los Angeles", ("#552583", "#FDB927"), nickname="LA"),
    SportsTeam("Celtics", "NBA", "Boston", ("#007A33", "#BA9653")),
    SportsTeam("Warriors", "NBA", "Golden State", ("#1D428A", "#FFC72C")),
    SportsTeam("Bulls", "NBA", "Chicago", ("#CE1141", "#000000")),
    SportsTeam("Heat", "NBA", "Miami", ("#98002E", "#F9A01B")),
    SportsTeam("Knicks", "NBA", "New York", ("#006BB6", "#F58426")),
    SportsTeam("Nets", "NBA", "Brooklyn", ("#000000", "#FFFFFF")),
    SportsTeam("Mavericks", "NBA", "Dallas", ("#00538C", "#002B5E")),
    SportsTeam("Spurs", "NBA", "San Antonio", ("#C4CED4", "#000000")),
    SportsTeam("Rockets", "NBA", "Houston", ("#CE1141", "#000000")),
    SportsTeam("Nuggets", "NBA", "Denver", ("#0E2240", "#FEC524")),
    SportsTeam("Suns", "NBA", "Phoenix", ("#1D1160", "#E56020")),
    SportsTeam("Bucks", "NBA", "Milwaukee", ("#00471B", "#EEE1C6")),
    SportsTeam("Sixers", "NBA", "Philadelphia", ("#006BB6", "#ED174C")),
    SportsTeam("Raptors", "NBA", "Toronto", ("#CE1141", "#000000")),
    SportsTeam("Clippers", "NBA", "Los Angeles", ("#C8102E", "#1D428A")),
    SportsTeam("Thunder", "NBA", "Oklahoma City", ("#007AC1", "#EF3B24"), nickname="OKC"),
    SportsTeam("Grizzlies", "NBA", "Memphis", ("#5D76A9", "#12173F")),
    SportsTeam("Pelicans", "NBA", "New Orleans", ("#0C2340", "#C8102E")),
    SportsTeam("Timberwolves", "NBA", "Minnesota", ("#0C2340", "#236192")),
    SportsTeam("Trail Blazers", "NBA", "Portland", ("#E03A3E", "#000000")),
    SportsTeam("Jazz", "NBA", "Utah", ("#002B5C", "#F9A01B")),
    SportsTeam("Kings", "NBA", "Sacramento", ("#5A2D81", "#63727A")),
    SportsTeam("Cavaliers", "NBA", "Cleveland", ("#860038", "#041E42")),
    SportsTeam("Pistons", "NBA", "Detroit", ("#C8102E", "#1D42BA")),
    SportsTeam("Pacers", "NBA", "Indiana", ("#002D62", "#FDBC44")),
    SportsTeam("Hawks", "NBA", "Atlanta", ("#E03A3E", "#C1D32F")),
    SportsTeam("Hornets", "NBA", "Charlotte", ("#1D1160", "#00788C")),
    SportsTeam("Magic", "NBA", "Orlando", ("#0077C0", "#000000")),
    SportsTeam("Wizards", "NBA", "Washington", ("#002B5C", "#E31837")),
    SportsTeam("Aces", "WNBA", "Las Vegas", ("#A7A8AA", "#000000", "#C8102E")),
    SportsTeam("Dream", "WNBA", "Atlanta", ("#E31837", "#418FDE", "#C6D600")),
    SportsTeam("Sky", "WNBA", "Chicago", ("#5091CD", "#FFD520")),
    SportsTeam("Sun", "WNBA", "Connecticut", ("#F05023", "#0A2240")),
    SportsTeam("Wings", "WNBA", "Dallas", ("#002B5C", "#C4D600")),
    SportsTeam("Fever", "WNBA", "Indiana", ("#002D62", "#E03A3E", "#FFC633")),
    SportsTeam("Sparks", "WNBA", "Los Angeles", ("#552583", "#FDB927"), nickname="LA"),
    SportsTeam("Lynx", "WNBA", "Minnesota", ("#0C2340", "#236192", "#78BE20")),
    SportsTeam("Liberty", "WNBA", "New York", ("#6ECEB2", "#000000", "#FF6B00"), nickname="NY"),
    SportsTeam("Mercury", "WNBA", "Phoenix", ("#201747", "#E56020", "#1D1160")),
    SportsTeam("Storm", "WNBA", "Seattle", ("#2C5234", "#FFC222")),
    SportsTeam("Mystics", "WNBA", "Washington", ("#002B5C", "#E31837")),
    SportsTeam("Valkyries", "WNBA", "Golden State", ("#552583", "#FDB927", "#1D428A")),
    SportsTeam("Royals", "MLB", "Kansas City", ("#004687", "#C09A5B"), nickname="KC"),
    SportsTeam("Yankees", "MLB", "New York", ("#003087", "#FFFFFF"), nickname="NY"),
    SportsTeam("Red Sox", "MLB", "Boston", ("#BD3039", "#0C2340")),
    SportsTeam("Dodgers", "MLB", "Los Angeles", ("#005A9C", "#FFFFFF"), nickname="LA"),
    SportsTeam("Cubs", "MLB", "Chicago", ("#0E3386", "#CC3433")),
    SportsTeam("Cardinals", "MLB", "St. Louis", ("#C41E3A", "#0C2340")),
    SportsTeam("Giants", "MLB", "San Francisco", ("#FD5A1E", "#27251F"), nickname="SF"),
    SportsTeam("Braves", "MLB", "Atlanta", ("#CE1141", "#13274F")),
    SportsTeam("Astros", "MLB", "Houston", ("#002D62", "#EB6E1F")),
    SportsTeam("Phillies", "MLB", "Philadelphia", ("#E81828", "#002D72")),
    SportsTeam("Mets", "MLB", "New York", ("#002D72", "#FF5910")),
    SportsTeam("Rangers", "MLB", "Texas", ("#003278", "#C0111F")),
    SportsTeam("Padres", "MLB", "San Diego", ("#2F241D", "#FFC425")),
    SportsTeam("Mariners", "MLB", "Seattle", ("#0C2C56", "#005C5C")),
    SportsTeam("White Sox", "MLB", "Chicago", ("#27251F", "#C4CED4")),
    SportsTeam("Tigers", "MLB", "Detroit", ("#0C2340", "#FA4616")),
    SportsTeam("Twins", "MLB", "Minnesota", ("#002B5C", "#D31145")),
    SportsTeam("Guardians", "MLB", "Cleveland", ("#00385D", "#E50022")),
    SportsTeam("Orioles", "MLB", "Baltimore", ("#DF4601", "#000000")),
    SportsTeam("Blue Jays", "MLB", "Toronto", ("#134A8E", "#1D2D5C")),
    SportsTeam("Rays", "MLB", "Tampa Bay", ("#092C5C", "#8FBCE6")),
    SportsTeam("Athletics", "MLB", "Oakland", ("#003831", "#EFB21E")),
    SportsTeam("Angels", "MLB", "Los Angeles", ("#BA0021", "#003263")),
    SportsTeam("Reds", "MLB", "Cincinnati", ("#C6011F", "#000000")),
    SportsTeam("Brewers", "MLB", "Milwaukee", ("#12284B", "#B6922E")),
    SportsTeam("Pirates", "MLB", "Pittsburgh", ("#27251F", "#FDB827")),
    SportsTeam("Rockies", "MLB", "Colorado", ("#33006F", "#C4CED4")),
    SportsTeam("Diamondbacks", "MLB", "Arizona", ("#A71930", "#E3D4AD")),
    SportsTeam("Marlins", "MLB", "Miami", ("#00A3E0", "#EF3340")),
    SportsTeam("Nationals", "MLB", "Washington", ("#AB0003", "#14225A")),
    SportsTeam("Blackhawks", "NHL", "Chicago", ("#CF0A2C", "#000000")),
    SportsTeam("Bruins", "NHL", "Boston", ("#FFB81C", "#000000")),
    SportsTeam("Rangers", "NHL", "New York", ("#0038A8", "#CE1126")),
    SportsTeam("Maple Leafs", "NHL", "Toronto", ("#00205B", "#FFFFFF")),
    SportsTeam("Canadiens", "NHL", "Montreal", ("#AF1E2D", "#192168")),
    SportsTeam("Red Wings", "NHL", "Detroit", ("#CE1126", "#FFFFFF")),
    SportsTeam("Penguins", "NHL", "Pittsburgh", ("#FFB81C", "#000000")),
    SportsTeam("Flyers", "NHL", "Philadelphia", ("#F74902", "#000000")),
    SportsTeam("Avalanche", "NHL", "Colorado", ("#6F263D", "#236192")),
    SportsTeam("Lightning", "NHL", "Tampa Bay", ("#002868", "#FFFFFF")),
    SportsTeam("Golden Knights", "NHL", "Vegas", ("#B4975A", "#333F42")),
    SportsTeam("Capitals", "NHL", "Washington", ("#C8102E", "#041E42")),
    SportsTeam("Oilers", "NHL", "Edmonton", ("#041E42", "#FF4C00")),
    SportsTeam("Flames", "NHL", "Calgary", ("#D2001C", "#FAA819")),
    SportsTeam("Blues", "NHL", "St. Louis", ("#002F87", "#FCB514")),
    SportsTeam("Stars", "NHL", "Dallas", ("#006847", "#8F8F8C")),
    SportsTeam("Kings", "NHL", "Los Angeles", ("#111111", "#A2AAAD")),
    SportsTeam("Sharks", "NHL", "San Jose", ("#006D75", "#EA7200")),
    SportsTeam("Ducks", "NHL", "Anaheim", ("#F47A38", "#000000")),
    SportsTeam("Kraken", "NHL", "Seattle", ("#001628", "#99D9D9")),
    SportsTeam("Wild", "NHL", "Minnesota", ("#154734", "#A6192E")),
    SportsTeam("Predators", "NHL", "Nashville", ("#FFB81C", "#041E42")),
    SportsTeam("Panthers", "NHL", "Florida", ("#041E42", "#C8102E")),
    SportsTeam("Hurricanes", "NHL", "Carolina", ("#CC0000", "#000000")),
    SportsTeam("Blue Jackets", "NHL", "Columbus", ("#002654", "#CE1126")),
    SportsTeam("Devils", "NHL", "New Jersey", ("#CE1126", "#000000")),
    SportsTeam("Islanders", "NHL", "New York", ("#00539B", "#F47D30")),
    SportsTeam("Sabres", "NHL", "Buffalo", ("#002654", "#FCB514")),
    SportsTeam("Senators", "NHL", "Ottawa", ("#C52032", "#C2912C")),
    SportsTeam("Jets", "NHL", "Winnipeg", ("#041E42", "#004C97")),
    SportsTeam("Canucks", "NHL", "Vancouver", ("#00205B", "#00843D")),
    SportsTeam("Coyotes", "NHL", "Utah", ("#8C2633", "#E2D6B5")),
    SportsTeam("Sporting KC", "MLS", "Kansas City", ("#0067B1", "#A1A1A4")),
    SportsTeam("Galaxy", "MLS", "Los Angeles", ("#00245D", "#FFD200")),
    SportsTeam("LAFC", "MLS", "Los Angeles", ("#000000", "#C39E6D")),
    SportsTeam("Sounders", "MLS", "Seattle", ("#5D9741", "#005695")),
    SportsTeam("Atlanta United", "MLS", "Atlanta", ("#80000A", "#A19060")),
    SportsTeam("Inter Miami", "MLS", "Miami", ("#F7B5CD", "#231F20")),
    SportsTeam("NYCFC", "MLS", "New York", ("#6CACE4", "#041E42")),
    SportsTeam("Red Bulls", "MLS", "New York", ("#ED1E36", "#1E255D")),
    SportsTeam("FC Cincinnati", "MLS", "Cincinnati", ("#FC4C02", "#263B80")),
    SportsTeam("Austin FC", "MLS", "Austin", ("#00B140", "#000000")),
    SportsTeam("Angel City", "NWSL", "Los Angeles", ("#000000", "#FFFFFF", "#E65100")),
    SportsTeam("Bay FC", "NWSL", "San Francisco", ("#00A6A6", "#1E1E1E")),
    SportsTeam("Red Stars", "NWSL", "Chicago", ("#DA291C", "#0C2340")),
    SportsTeam("Dash", "NWSL", "Houston", ("#FF6B00", "#00B5E2")),
    SportsTeam("Current", "NWSL", "Kansas City", ("#CF3339", "#102A47")),
    SportsTeam("Gotham FC", "NWSL", "New York/New Jersey", ("#000000", "#00FF7F")),
    SportsTeam("Courage", "NWSL", "North Carolina", ("#003153", "#85C1E9")),
    SportsTeam("Pride", "NWSL", "Orlando", ("#5E2B7E", "#FFFFFF")),
    SportsTeam("Thorns", "NWSL", "Portland", ("#004B28", "#C5B783")),
    SportsTeam("Racing Louisville", "NWSL", "Louisville", ("#6C2E8D", "#FFD100")),
    SportsTeam("Wave", "NWSL", "San Diego", ("#003DA5", "#FF5733")),
    SportsTeam("Reign", "NWSL", "Seattle", ("#0B3D91", "#FFD700")),
    SportsTeam("Royals", "NWSL", "Utah", ("#FFD700", "#0B3D91")),
    SportsTeam("Spirit", "NWSL", "Washington", ("#0A0A0A", "#AD1831")),
)


def league_folder_id(league: str) -> str:
    return f"league_{league.lower()}"


def team_node_id(team: SportsTeam, prefix: str = "team") -> str:
    """Stable node id for a team, e.g. 'team_nfl_49ers'."""
    sanitized = team.name.lower().replace(" ", "_").replace("'", "").replace("-", "_")
    return f"{prefix}_{team.league.lower()}_{sanitized}"


def find_team(query: str) -> SportsTeam | None:
    """First team matching a full name, short name or nickname (case-insensitive)."""
    for team in SPORTS_TEAMS:
        if team.matches(query):
            return team
    return None


def search_teams(query: str) -> list[SportsTeam]:
    """Teams whose name, city or nickname contains the query."""
    q = query.strip().lower()
    if not q:
        return []
    return [
        t
        for t in SPORTS_TEAMS
        if q in t.display_name.lower()
        or q in t.name.lower()
        or q in t.city.lower()
        or (t.nickname is not None and q in t.nickname.lower())
    ]

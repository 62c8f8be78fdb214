"""Reference dataset loaded into a freshly created location table."""
import logging
from typing import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from repositories.location_repository import create_location

LOG = logging.getLogger(__name__)

# (address, latitude, longitude) for the Greater Toronto Area.
SEED_LOCATIONS: tuple[tuple[str, float, float], ...] = (
    ("Downtown Toronto", 43.6532, -79.3832),
    ("Scarborough", 43.7764, -79.2318),
    ("North York", 43.7615, -79.4111),
    ("Etobicoke", 43.6289, -79.5200),
    ("Mississauga", 43.5890, -79.6441),
    ("Brampton", 43.7315, -79.7624),
    ("Markham", 43.8561, -79.3370),
    ("Oshawa", 43.8971, -78.8658),
    ("Pickering", 43.8355, -79.0890),
    ("Ajax", 43.8509, -79.0204),
    ("Whitby", 43.8975, -78.9420),
    ("Vaughan", 43.8361, -79.4983),
    ("Richmond Hill", 43.8828, -79.4403),
    ("Aurora", 44.0065, -79.4504),
    ("Newmarket", 44.0592, -79.4613),
    ("King City", 43.9283, -79.5287),
    ("Bolton", 43.8744, -79.7356),
    ("Caledon", 43.8571, -79.8821),
    ("Milton", 43.5183, -79.8774),
    ("Georgetown", 43.6497, -79.9040),
    ("Oakville", 43.4675, -79.6877),
    ("Burlington", 43.3255, -79.7990),
    ("Hamilton", 43.2557, -79.8711),
    ("Stoney Creek", 43.2176, -79.7653),
    ("Grimsby", 43.2000, -79.5667),
    ("Niagara Falls", 43.0896, -79.0849),
    ("Port Credit", 43.5520, -79.5889),
    ("Meadowvale", 43.5975, -79.7557),
    ("Erin Mills", 43.5481, -79.6925),
    ("Cooksville", 43.5765, -79.6144),
    ("Dixie", 43.6092, -79.5961),
    ("Malton", 43.7009, -79.6346),
    ("Rexdale", 43.7161, -79.5881),
    ("Weston", 43.7011, -79.5129),
    ("York", 43.6890, -79.4537),
    ("Midtown Toronto", 43.6997, -79.3981),
    ("East York", 43.7061, -79.3272),
    ("Leslieville", 43.6667, -79.3312),
    ("The Beaches", 43.6711, -79.2960),
    ("Riverdale", 43.6761, -79.3485),
    ("Cabbagetown", 43.6655, -79.3698),
    ("Liberty Village", 43.6387, -79.4223),
    ("High Park", 43.6465, -79.4637),
    ("The Junction", 43.6675, -79.4741),
    ("Roncesvalles", 43.6414, -79.4481),
    ("Little Italy", 43.6550, -79.4180),
    ("Kensington Market", 43.6543, -79.4001),
    ("Chinatown", 43.6530, -79.3989),
    ("Financial District", 43.6481, -79.3810),
    ("Harbourfront", 43.6381, -79.3793),
    ("Distillery District", 43.6505, -79.3596),
    ("St. Lawrence Market", 43.6486, -79.3716),
    ("Yorkville", 43.6715, -79.3930),
    ("Rosedale", 43.6827, -79.3793),
    ("Forest Hill", 43.6936, -79.4156),
    ("Lawrence Park", 43.7220, -79.3989),
    ("Leaside", 43.7080, -79.3630),
    ("Don Mills", 43.7392, -79.3437),
    ("Bayview Village", 43.7717, -79.3856),
    ("Willowdale", 43.7706, -79.4144),
    ("Thornhill", 43.8133, -79.4296),
    ("Concord", 43.8009, -79.5074),
    ("Maple", 43.8505, -79.5178),
    ("Kleinburg", 43.8430, -79.6282),
    ("Woodbridge", 43.7904, -79.6057),
    ("Weston Downs", 43.7891, -79.5483),
    ("Malvern", 43.8072, -79.2141),
    ("Rouge", 43.8079, -79.1533),
    ("Guildwood", 43.7436, -79.2023),
    ("Woburn", 43.7710, -79.2387),
    ("Morningside", 43.7768, -79.1907),
    ("Agincourt", 43.7872, -79.2772),
    ("Wexford", 43.7488, -79.2837),
    ("Kennedy Park", 43.7163, -79.2664),
    ("Birch Cliff", 43.6921, -79.2657),
    ("Clairlea", 43.7141, -79.2925),
    ("Victoria Village", 43.7278, -79.3071),
    ("Flemingdon Park", 43.7052, -79.3368),
    ("Banbury-Don Mills", 43.7495, -79.3451),
    ("Bayview Glen", 43.8384, -79.3965),
    ("Unionville", 43.8615, -79.3125),
    ("Cornell", 43.8830, -79.2292),
    ("Greensborough", 43.9014, -79.2453),
    ("Bur Oak", 43.8785, -79.2682),
    ("Mount Joy", 43.9168, -79.2702),
    ("Stouffville", 43.9709, -79.2493),
    ("Ballantrae", 44.0052, -79.3169),
    ("Goodwood", 44.0433, -79.1867),
    ("Uxbridge", 44.1005, -79.1169),
    ("Brooklin", 43.9617, -78.9444),
    ("Port Perry", 44.1051, -78.9445),
    ("Courtice", 43.9168, -78.7892),
    ("Bowmanville", 43.9126, -78.6878),
    ("Newcastle", 43.9056, -78.5881),
    ("Clarington", 43.9337, -78.6880),
    ("Whitby Shores", 43.8559, -78.9426),
    ("Brookfield", 43.8335, -79.3755),
    ("York University Heights", 43.7672, -79.4935),
    ("Downsview", 43.7353, -79.4727),
    ("Jane and Finch", 43.7620, -79.5153),
    ("Finch West", 43.7635, -79.5068),
    ("Steeles", 43.8120, -79.3245),
    ("L’Amoreaux", 43.7994, -79.3120),
    ("Hillcrest Village", 43.7963, -79.3556),
    ("Pleasant View", 43.7787, -79.3415),
    ("Scarborough Town Centre", 43.7764, -79.2579),
    ("Centennial College", 43.7842, -79.2261),
    ("UTSC Campus", 43.7841, -79.1861),
    ("Toronto Pearson Airport", 43.6777, -79.6248),
    ("Toronto Islands", 43.6205, -79.3784),
    ("Exhibition Place", 43.6330, -79.4183),
    ("Yonge-Dundas Square", 43.6561, -79.3802),
    ("Casa Loma", 43.6780, -79.4094),
    ("Toronto Zoo", 43.8177, -79.1859),
    ("CN Tower", 43.6426, -79.3871),
    ("Rogers Centre", 43.6415, -79.3893),
    ("High Park Zoo", 43.6465, -79.4637),
    ("Ontario Place", 43.6280, -79.4185),
    ("Union Station", 43.6452, -79.3806),
)


def load_seed_locations(session: Session, entries: Iterable[tuple[str, float, float]] = SEED_LOCATIONS) -> int:
    """Insert each entry through the normal create path. Returns how many were inserted.

    An entry whose address is already present is skipped with a warning; the
    remaining entries still load.
    """
    inserted = 0
    for address, latitude, longitude in entries:
        try:
            create_location(session, address, latitude, longitude)
        except IntegrityError:
            session.rollback()
            LOG.warning("Seed entry %r not inserted: address already exists", address)
            continue
        inserted += 1
    LOG.info("Seeded %d locations", inserted)
    return inserted

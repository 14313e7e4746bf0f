"""University resolution from .edu email addresses."""

from .exceptions import NonUniversityEmailError


UNIVERSITY_DOMAINS = {
    'carleton.edu': 'Carleton College',
    'umn.edu': 'University of Minnesota',
    'harvard.edu': 'Harvard University',
    'stanford.edu': 'Stanford University',
    'mit.edu': 'Massachusetts Institute of Technology',
    'berkeley.edu': 'University of California, Berkeley',
    'yale.edu': 'Yale University',
    'princeton.edu': 'Princeton University',
    'columbia.edu': 'Columbia University',
    'cornell.edu': 'Cornell University',
    'upenn.edu': 'University of Pennsylvania',
    'dartmouth.edu': 'Dartmouth College',
    'brown.edu': 'Brown University',
    'nyu.edu': 'New York University',
    'ucla.edu': 'University of California, Los Angeles',
    'uchicago.edu': 'University of Chicago',
    'duke.edu': 'Duke University',
    'northwestern.edu': 'Northwestern University',
    'jhu.edu': 'Johns Hopkins University',
    'rice.edu': 'Rice University',
    'vanderbilt.edu': 'Vanderbilt University',
    'emory.edu': 'Emory University',
    'georgetown.edu': 'Georgetown University',
    'notredame.edu': 'University of Notre Dame',
    'cmu.edu': 'Carnegie Mellon University',
    'tufts.edu': 'Tufts University',
    'usc.edu': 'University of Southern California',
    'umich.edu': 'University of Michigan',
    'wisc.edu': 'University of Wisconsin-Madison',
    'illinois.edu': 'University of Illinois',
    'gatech.edu': 'Georgia Institute of Technology',
    'purdue.edu': 'Purdue University',
    'utexas.edu': 'University of Texas at Austin',
    'osu.edu': 'Ohio State University',
    'psu.edu': 'Pennsylvania State University',
    'ufl.edu': 'University of Florida',
    'ucdavis.edu': 'University of California, Davis',
    'uci.edu': 'University of California, Irvine',
    'ucsd.edu': 'University of California, San Diego',
    'ucsb.edu': 'University of California, Santa Barbara',
    'uw.edu': 'University of Washington',
    'bu.edu': 'Boston University',
    'bc.edu': 'Boston College',
    'virginia.edu': 'University of Virginia',
    'unc.edu': 'University of North Carolina',
    'umd.edu': 'University of Maryland',
    'rutgers.edu': 'Rutgers University',
    'pitt.edu': 'University of Pittsburgh',
    'wustl.edu': 'Washington University in St. Louis',
    'uiowa.edu': 'University of Iowa',
    'asu.edu': 'Arizona State University',
    'ua.edu': 'University of Alabama',
    'colostate.edu': 'Colorado State University',
    'colorado.edu': 'University of Colorado Boulder',
}


def get_email_domain(email: str) -> str:
    """
    Return the lowercased domain of a university email address.

    Raises:
        NonUniversityEmailError: If the address is malformed or not .edu
    """
    parts = email.strip().split('@')
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise NonUniversityEmailError("Please use a valid .edu email address")

    domain = parts[1].lower()
    if not domain.endswith('.edu'):
        raise NonUniversityEmailError("Please use a .edu email address")

    return domain


def resolve_university(email: str) -> str:
    """
    Map a .edu email address to a university display name.

    Known domains come from UNIVERSITY_DOMAINS. Anything else is named after
    its first domain label, e.g. ``student@unmapped-school.edu`` resolves to
    ``"Unmapped-school University"``.

    Args:
        email: Email address to resolve

    Returns:
        University display name

    Raises:
        NonUniversityEmailError: If the address is not a .edu address
    """
    domain = get_email_domain(email)

    if domain in UNIVERSITY_DOMAINS:
        return UNIVERSITY_DOMAINS[domain]

    label = domain.split('.')[0]
    return f"{label[:1].upper()}{label[1:]} University"

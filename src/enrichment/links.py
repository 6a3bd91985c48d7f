GOOGLE_MAPS_URL = "https://www.google.com/maps"


def google_maps_link(latitude, longitude):
    return f"{GOOGLE_MAPS_URL}?q={latitude},{longitude}"


def street_view_link(latitude, longitude):
    # layer=c opens Street View at the cbll point
    return f"{GOOGLE_MAPS_URL}?q={latitude},{longitude}&layer=c&cbll={latitude},{longitude}"

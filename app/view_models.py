"""
Demo View Models

Each view-model is a subset of one or more data objects plus display
formatting. They hold references to the data object signals, so an update to
`contact.name` shows up everywhere it is bound.
"""

from ropes import ViewModel, computed

from formatting import formatted_number, time_ago


class ContactQuickStats(ViewModel):
    uses = ("contact", "outlet")

    def __init__(self, models):
        super().__init__(models)
        contact = models.contact
        self.name = contact.name
        self.phone = contact.phone
        self.email = contact.email
        self.born_ago = computed(lambda: time_ago(contact.date_of_birth()))
        self.outlet_name = models.outlet.name


class OutletQuickStats(ViewModel):
    uses = ("outlet",)

    def __init__(self, models):
        super().__init__(models)
        outlet = models.outlet
        self.name = outlet.name
        self.circulation = computed(lambda: formatted_number(outlet.circulation()))

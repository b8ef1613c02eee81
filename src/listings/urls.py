'''
Urls for listings app
'''

from django.urls import path
from .views import (
    ListingIndexView,
    ListingCreateView,
    ListingDetailView,
    make_offer,
    accept_offer,
    decline_offer,
)

urlpatterns = [
    path('listings/', ListingIndexView.as_view(), name='listing-index'),
    path('listings/new/', ListingCreateView.as_view(), name='listing-new'),
    path('listings/<int:listing_id>/', ListingDetailView.as_view(), name='listing-detail'),
    path('listings/<int:listing_id>/offers/', make_offer, name='make-offer'),
    path('offers/<int:offer_id>/accept/', accept_offer, name='accept-offer'),
    path('offers/<int:offer_id>/decline/', decline_offer, name='decline-offer'),
]

"""Views for listings and settling offers on them."""
import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import HttpResponseForbidden
from django.shortcuts import get_object_or_404, redirect, render
from django.views import View
from django.views.decorators.http import require_POST

from social.services.social_graph import default_social_graph
from .forms import ListingForm, OfferForm
from .models import Listing, Offer

logger = logging.getLogger(__name__)


class ListingIndexView(View):
    """All listings, newest first"""

    def get(self, request):
        listings = Listing.objects.select_related('user')
        return render(request, 'listings/index.html', {'listings': listings})


class ListingCreateView(LoginRequiredMixin, View):
    """Create a listing owned by the current user"""

    def get(self, request):
        return render(request, 'listings/form.html', {'form': ListingForm()})

    def post(self, request):
        form = ListingForm(request.POST)
        if not form.is_valid():
            return render(request, 'listings/form.html', {'form': form}, status=400)
        listing = form.save(commit=False)
        listing.user = request.user
        listing.save()
        return redirect('listing-detail', listing_id=listing.pk)


class ListingDetailView(View):
    """A listing with its offers"""

    def get(self, request, listing_id):
        listing = get_object_or_404(Listing.objects.select_related('user'), pk=listing_id)
        can_accept = (
            request.user.is_authenticated
            and default_social_graph().can_accept(request.user, listing)
        )
        context = {
            'listing': listing,
            'offers': listing.offers.select_related('user'),
            'can_accept': can_accept,
            'offer_form': OfferForm(),
        }
        return render(request, 'listings/detail.html', context)


@login_required
@require_POST
def make_offer(request, listing_id):
    """Record an offer from the current user on someone else's listing"""
    listing = get_object_or_404(Listing, pk=listing_id)

    if listing.user_id == request.user.pk:
        messages.error(request, 'You cannot make an offer on your own listing.')
        return redirect('listing-detail', listing_id=listing.pk)

    form = OfferForm(request.POST)
    if not form.is_valid():
        messages.error(request, 'Please enter a valid offer amount.')
        return redirect('listing-detail', listing_id=listing.pk)

    offer = form.save(commit=False)
    offer.listing = listing
    offer.user = request.user
    offer.save()
    logger.info("User %s offered %s on listing %s", request.user.pk, offer.amount, listing.pk)
    return redirect('listing-detail', listing_id=listing.pk)


def _settle_offer(request, offer_id, status):
    offer = get_object_or_404(Offer.objects.select_related('listing'), pk=offer_id)

    if not default_social_graph().can_accept(request.user, offer.listing):
        return HttpResponseForbidden('Only the listing owner can settle offers.')

    if not offer.is_pending:
        messages.error(request, f'This offer was already {offer.status}.')
        return redirect('listing-detail', listing_id=offer.listing_id)

    offer.status = status
    offer.save(update_fields=['status'])
    logger.info("Offer %s on listing %s %s", offer.pk, offer.listing_id, status)
    return redirect('listing-detail', listing_id=offer.listing_id)


@login_required
@require_POST
def accept_offer(request, offer_id):
    """Accept an offer on one of the current user's listings"""
    return _settle_offer(request, offer_id, Offer.ACCEPTED)


@login_required
@require_POST
def decline_offer(request, offer_id):
    """Decline an offer on one of the current user's listings"""
    return _settle_offer(request, offer_id, Offer.DECLINED)

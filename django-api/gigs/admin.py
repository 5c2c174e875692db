from django.contrib import admin

from gigs.models import Act, Gig, Performance, Ticket, TicketPrice, Venue


class PerformanceInline(admin.TabularInline):
    model = Performance
    extra = 1


class TicketPriceInline(admin.TabularInline):
    model = TicketPrice
    extra = 1


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ["name", "hire_cost", "capacity"]
    search_fields = ["name"]


@admin.register(Act)
class ActAdmin(admin.ModelAdmin):
    list_display = ["name", "genre", "standard_fee"]
    list_filter = ["genre"]
    search_fields = ["name"]


@admin.register(Gig)
class GigAdmin(admin.ModelAdmin):
    list_display = ["title", "venue", "start", "status"]
    list_filter = ["status", "venue"]
    search_fields = ["title"]
    inlines = [PerformanceInline, TicketPriceInline]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["customer_name", "customer_email", "gig", "price_type", "cost"]
    list_filter = ["gig__venue"]
    search_fields = ["customer_name", "customer_email"]

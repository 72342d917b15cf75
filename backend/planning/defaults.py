"""Starter checklist and payment timeline offered to new planners"""

TIMEFRAMES = ['12+ months', '6-12 months', '3-6 months', '1-3 months', 'Week of']

DEFAULT_MILESTONES = [
    ('Book your venue', '12+ months'),
    ('Set your total budget', '12+ months'),
    ('Choose your wedding date', '12+ months'),
    ('Start your guest list', '12+ months'),
    ('Get engagement photos taken', '12+ months'),
    ('Book photographer & videographer', '6-12 months'),
    ('Book caterer', '6-12 months'),
    ('Send save-the-dates', '6-12 months'),
    ('Shop for wedding attire', '6-12 months'),
    ('Book hair & makeup team', '6-12 months'),
    ('Book entertainment (band or DJ)', '3-6 months'),
    ('Book florist & decor', '3-6 months'),
    ('Finalize guest list & send invitations', '3-6 months'),
    ('Schedule cake tastings', '3-6 months'),
    ('Final dress fitting', '1-3 months'),
    ('Confirm all vendor details', '1-3 months'),
    ('Create ceremony day-of timeline', '1-3 months'),
    ('Submit final headcount to caterer', 'Week of'),
    ('Pick up wedding rings', 'Week of'),
    ('Deliver vendor final payments', 'Week of'),
]

DEFAULT_PAYMENTS = [
    ('Mar 15', 'DJ Final Balance', '$3,000'),
    ('Apr 02', 'Catering 50% Milestone', '$6,250'),
    ('May 20', 'Florist Retainer', '$1,500'),
    ('Jun 01', 'Venue Final Payment', '$12,000'),
]


def default_milestone_rows():
    return [
        {'label': label, 'timeframe': timeframe, 'sort_order': index}
        for index, (label, timeframe) in enumerate(DEFAULT_MILESTONES)
    ]


def default_payment_rows():
    return [
        {'date': date, 'label': label, 'amount': amount, 'sort_order': index}
        for index, (date, label, amount) in enumerate(DEFAULT_PAYMENTS)
    ]

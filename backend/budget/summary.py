"""
Budget roll-ups.

Category status compares what has been committed (sum of item costs) to the
category target: ``pending`` with nothing committed, ``over`` above target,
``on_target`` exactly on it and ``under`` otherwise.
"""


def spend_percentage(spent, target):
    if not target:
        return 0
    return round(spent * 100 / target)


def category_status(spent, target):
    if spent == 0:
        return 'pending'
    if spent > target:
        return 'over'
    if spent == target:
        return 'on_target'
    return 'under'


def summarize_category(category, items):
    spent = sum(item.cost for item in items)
    paid = sum(item.cost for item in items if item.paid)
    return {
        'id': category.pk,
        'name': category.name,
        'target': category.target,
        'spent': spent,
        'paid': paid,
        'percentage': spend_percentage(spent, category.target),
        'status': category_status(spent, category.target),
    }


def summarize_budget(total_budget, categories, items):
    """Totals for one owner's budget plus a breakdown per category"""
    items_by_category = {}
    for item in items:
        items_by_category.setdefault(item.category_id, []).append(item)

    breakdown = [
        summarize_category(category, items_by_category.get(category.pk, []))
        for category in categories
    ]
    committed = sum(item.cost for item in items)
    return {
        'totalBudget': total_budget,
        'allocated': sum(category.target for category in categories),
        'committed': committed,
        'paid': sum(item.cost for item in items if item.paid),
        'remaining': total_budget - committed,
        'categories': breakdown,
    }

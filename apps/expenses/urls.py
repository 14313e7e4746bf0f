from django.urls import path
from . import views

app_name = 'expenses'

urlpatterns = [
    # Pools
    path('parties/<uuid:party_id>/pools/', views.party_pools, name='party-pools'),
    path('pools/<uuid:pool_id>/join/', views.join_pool, name='pool-join'),
    path('pools/<uuid:pool_id>/leave/', views.leave_pool, name='pool-leave'),
    path('pools/<uuid:pool_id>/balances/', views.pool_balances, name='pool-balances'),
    path('pools/<uuid:pool_id>/settle/', views.settle_pool, name='pool-settle'),

    # Expenses
    path('parties/<uuid:party_id>/expenses/', views.party_expenses, name='party-expenses'),
    path('to-settle/', views.to_settle, name='to-settle'),
    path('paid/', views.paid, name='paid'),
    path('<uuid:expense_id>/settle/', views.settle, name='expense-settle'),
]

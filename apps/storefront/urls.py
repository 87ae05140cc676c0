from django.urls import path
from . import views

app_name = 'storefront'

urlpatterns = [
    path('login/', views.LoginView.as_view(), name='login'),
    path('logout/', views.LogoutView.as_view(), name='logout'),
    path('register/', views.RegisterView.as_view(), name='register'),
    path('products/', views.ProductListView.as_view(), name='products'),
    path('purchase/', views.PurchaseView.as_view(), name='purchase'),
    path('purchases/', views.AllPurchasesView.as_view(), name='purchases'),
    path('my-purchases/', views.MyPurchasesView.as_view(), name='my-purchases'),
]

"""Accounts app package.

Holds the single account model behind both marketplace account types:
end users who browse and review listings, and owners who list properties.
Staff accounts act as marketplace administrators. Use
``apps.accounts.models.CustomUser`` as the AUTH_USER_MODEL throughout the
project.
"""

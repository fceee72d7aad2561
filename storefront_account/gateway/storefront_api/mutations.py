from typing import Final

# https://shopify.dev/docs/api/storefront/latest/mutations/customerCreate
CUSTOMER_CREATE_MUTATION: Final[str] = """
mutation customerCreate(
  $input: CustomerCreateInput!,
  $country: CountryCode,
  $language: LanguageCode
) @inContext(country: $country, language: $language) {
  customerCreate(input: $input) {
    customer {
      id
    }
    customerUserErrors {
      code
      field
      message
    }
  }
}
"""

# https://shopify.dev/docs/api/storefront/latest/mutations/customeraccesstokencreate
CUSTOMER_ACCESS_TOKEN_CREATE_MUTATION: Final[str] = """
mutation registerLogin(
  $input: CustomerAccessTokenCreateInput!,
  $country: CountryCode,
  $language: LanguageCode
) @inContext(country: $country, language: $language) {
  customerAccessTokenCreate(input: $input) {
    customerUserErrors {
      code
      field
      message
    }
    customerAccessToken {
      accessToken
      expiresAt
    }
  }
}
"""

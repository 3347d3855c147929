# Services package.
#
#   post_service    : create / keyset listing / partial update /
#                      soft delete / password check for Post
#   encrypt_service : password hashing collaborator (passlib)
#
# PostService takes an AsyncSession so that the router layer controls the
# transaction boundary via the ``get_db`` dependency.

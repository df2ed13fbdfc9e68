"""Review persistence and rating recomputation."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from campusgo.errors import DuplicateReview, PersistenceError
from campusgo.models import Review, User
from campusgo.repositories.base import Repository

logger = logging.getLogger(__name__)

RATING_COLUMNS = {
    'requester': 'rating_as_requester',
    'runner': 'rating_as_runner',
}


class ReviewRepository(Repository):

    def exists(self, order_id, reviewer_id):
        return self.session.query(Review.id).filter_by(
            order_id=order_id,
            reviewer_id=reviewer_id
        ).first() is not None

    def add_and_recompute_rating(self, review):
        """Insert a review and refresh the target's rating in one transaction.

        The new rating is AVG over every review of the target in that role,
        including this one.

        Raises:
            DuplicateReview: (order, reviewer) already has a review
            PersistenceError: any other store failure; nothing is written
        """
        column = RATING_COLUMNS[review.role]
        try:
            self.session.add(review)
            self.session.flush()

            average = self.session.query(func.avg(Review.rating)).filter(
                Review.target_id == review.target_id,
                Review.role == review.role
            ).scalar()

            self.session.query(User).filter(User.id == review.target_id).update(
                {column: float(average)},
                synchronize_session=False
            )
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info(f'Duplicate review for order {review.order_id} by user {review.reviewer_id}')
            raise DuplicateReview() from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f'Failed to record review for order {review.order_id}: {e}', exc_info=True)
            raise PersistenceError('Failed to submit review') from e
        return review

from sqlalchemy import Column, Integer, String, Text, DateTime, Float, Boolean

from product_transactions.db.database import Base


class Transaction(Base):
    __tablename__ = "transactions"

    # ids come from the upstream dataset, not from a sequence
    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False)
    category = Column(String, index=True, nullable=False)
    image = Column(String, nullable=True)
    sold = Column(Boolean, nullable=False, default=False)
    date_of_sale = Column("dateOfSale", DateTime, index=True, nullable=False)

    def __repr__(self):
        return f"<Transaction id={self.id} title={self.title!r} price={self.price}>"

# dnssec_admin/database/models.py
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# Tables of the PowerDNS generic SQL backend. They are owned by PowerDNS,
# only the columns read here are mapped.

class Domain(db.Model):
    __tablename__ = 'domains'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, unique=True, index=True)
    master = db.Column(db.String(128))
    last_check = db.Column(db.Integer)
    type = db.Column(db.String(6), nullable=False, default='NATIVE')
    notified_serial = db.Column(db.Integer)
    account = db.Column(db.String(40))

    metadata_entries = db.relationship('DomainMetadata', backref='domain', lazy='dynamic')

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "master": self.master,
            "account": self.account
        }

class DomainMetadata(db.Model):
    __tablename__ = 'domainmetadata'

    id = db.Column(db.Integer, primary_key=True)
    domain_id = db.Column(db.Integer, db.ForeignKey('domains.id'), nullable=False, index=True)
    kind = db.Column(db.String(32))
    content = db.Column(db.Text)

    def to_dict(self):
        return {
            "id": self.id,
            "domain_id": self.domain_id,
            "kind": self.kind,
            "content": self.content
        }
